"""Entry points for hosts: prepare a config, validate it, or both."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from packagelint.application.prepare.preparer import DefaultRulePreparer
from packagelint.domain.exceptions import MissingConfigError, MissingValidatorError
from packagelint.domain.model.user_config import UserConfig

if TYPE_CHECKING:
    from collections.abc import Awaitable
    from typing import Any

    from packagelint.domain.model.prepared import PreparedConfig
    from packagelint.domain.model.results import ValidationOutput
    from packagelint.domain.ports.module_loader import ModuleLoaderProtocol

logger = logging.getLogger(__name__)


def _coerce_user_config(user_config: UserConfig | Mapping[str, Any] | None) -> UserConfig:
    if user_config is None:
        raise MissingConfigError
    if isinstance(user_config, UserConfig):
        return user_config
    return UserConfig.from_mapping(user_config)


async def prepare_config(
    user_config: UserConfig | Mapping[str, Any] | None,
    *,
    loader: ModuleLoaderProtocol | None = None,
) -> PreparedConfig:
    """Prepare a user config with its configured (or the default) preparer.

    Args:
        user_config: UserConfig or its raw mapping form.
        loader: Module loader for the default preparer. Ignored when the
            config names its own rule_preparer.

    Raises:
        MissingConfigError: If user_config is None.
        InvalidConfigError: On any configuration or resolution failure.
    """
    config = _coerce_user_config(user_config)
    if config.rule_preparer is not None:
        preparer = config.rule_preparer()
    else:
        preparer = DefaultRulePreparer(loader=loader)
    return await preparer.prepare_user_config(config)


def validate_prepared_config(prepared_config: PreparedConfig) -> Awaitable[ValidationOutput]:
    """Run a prepared config with the validator it carries.

    The validator is checked before anything is awaited, so a missing or
    malformed validator fails at call time.

    Raises:
        MissingValidatorError: If prepared_config has no usable rule_validator.
    """
    validator = getattr(prepared_config, "rule_validator", None)
    if validator is None:
        raise MissingValidatorError("Missing rule_validator in prepared_config")
    if not callable(getattr(validator, "validate_prepared_config", None)):
        raise MissingValidatorError("Invalid rule_validator in prepared_config")
    return validator.validate_prepared_config(prepared_config)


async def run_packagelint(
    user_config: UserConfig | Mapping[str, Any] | None,
    *,
    loader: ModuleLoaderProtocol | None = None,
) -> ValidationOutput:
    """Prepare and validate in one call.

    Raises:
        MissingConfigError: If user_config is None.
        InvalidConfigError: If preparation fails. The run never starts.
    """
    prepared_config = await prepare_config(user_config, loader=loader)
    logger.debug("Running %d prepared rule(s)", len(prepared_config.rules))
    return await validate_prepared_config(prepared_config)
