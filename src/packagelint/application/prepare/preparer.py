"""Config preparer: UserConfig -> PreparedConfig.

Orchestrates name resolution, rule accumulation and reporter construction.
FAIL-FIRST: any failure aborts preparation, no partial PreparedConfig.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from packagelint.application.prepare.accumulator import RuleAccumulator
from packagelint.application.prepare.reporters import prepare_reporters
from packagelint.application.resolve.resolver import NameResolver
from packagelint.application.validate.validator import DefaultRuleValidator
from packagelint.domain.model.error_levels import parse_error_level
from packagelint.domain.model.prepared import PreparedConfig
from packagelint.infrastructure.module_loader import default_module_loader

if TYPE_CHECKING:
    from packagelint.domain.model.user_config import UserConfig
    from packagelint.domain.ports.module_loader import ModuleLoaderProtocol
    from packagelint.domain.ports.validator import RuleValidatorProtocol

logger = logging.getLogger(__name__)


class DefaultRulePreparer:
    """Stock RulePreparerProtocol implementation.

    Example:
        preparer = DefaultRulePreparer(loader=registry)
        prepared = await preparer.prepare_user_config(user_config)
    """

    def __init__(self, loader: ModuleLoaderProtocol | None = None) -> None:
        """Initialize with a module loader.

        Args:
            loader: Plugin loader. None = entry-point registry with importlib fallback.
        """
        self._loader = loader if loader is not None else default_module_loader()

    @property
    def loader(self) -> ModuleLoaderProtocol:
        """Module loader used for name resolution."""
        return self._loader

    async def prepare_user_config(self, user_config: UserConfig) -> PreparedConfig:
        """Resolve, expand and merge a user config.

        Args:
            user_config: Raw configuration.

        Returns:
            PreparedConfig referencing this preparer and a fresh validator.

        Raises:
            InvalidErrorLevelError: If fail_on_error_level is unknown.
            InvalidConfigError: On any entry, collision or resolution failure.
        """
        fail_on_error_level = parse_error_level(user_config.fail_on_error_level)

        resolver = NameResolver(self._loader)
        accumulator = RuleAccumulator(resolver)
        rules = await accumulator.add_entries(user_config.rules)
        reporters = await prepare_reporters(user_config.reporters, resolver)

        prepared_config = PreparedConfig(
            fail_on_error_level=fail_on_error_level,
            rules=tuple(rules),
            reporters=tuple(reporters),
            rule_preparer=self,
            rule_validator=self._make_validator(user_config),
        )
        logger.debug(
            "Prepared %d rule(s) and %d reporter(s), fail_on_error_level=%s",
            len(prepared_config.rules),
            len(prepared_config.reporters),
            fail_on_error_level.value,
        )
        return prepared_config

    def _make_validator(self, user_config: UserConfig) -> RuleValidatorProtocol:
        if user_config.rule_validator is not None:
            return user_config.rule_validator()
        return DefaultRuleValidator()
