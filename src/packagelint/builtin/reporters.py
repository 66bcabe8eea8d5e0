"""Built-in reporters."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from packagelint.domain.model.results import RuleFailure, rule_status

if TYPE_CHECKING:
    from collections.abc import Mapping

    from packagelint.domain.model.prepared import PreparedConfig, PreparedRule
    from packagelint.domain.model.results import ValidationOutput, ValidationResult

logger = logging.getLogger(__name__)


class LoggingReporter:
    """Logs every lifecycle event. Useful when debugging configs and plugins.

    Options:
        level: Log level name for the messages (default "INFO").
    """

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        """Initialize from reporter options.

        Raises:
            ValueError: If the level option is not a known level name.
        """
        level_name = str((options or {}).get("level", "INFO")).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level_name!r}")
        self.level = level

    def on_validation_start(self, prepared_config: PreparedConfig) -> None:
        logger.log(
            self.level,
            "Validation started: %d rule(s), fail_on_error_level=%s",
            len(prepared_config.rules),
            prepared_config.fail_on_error_level.value,
        )

    def on_rule_start(self, rule: PreparedRule) -> None:
        logger.log(self.level, "Rule started: %s", rule.prepared_rule_name)

    def on_rule_result(self, rule: PreparedRule, result: ValidationResult) -> None:
        status = rule_status(result)
        if not isinstance(result, RuleFailure):
            logger.log(self.level, "Rule %s: %s", rule.prepared_rule_name, status.value)
            return
        logger.log(
            self.level,
            "Rule %s: %s at %s: %s",
            rule.prepared_rule_name,
            status.value,
            result.error_level.value,
            result.message,
        )

    def on_validation_complete(self, output: ValidationOutput) -> None:
        highest = output.highest_error_level.value if output.highest_error_level else "none"
        logger.log(
            self.level,
            "Validation complete: %d passed, %d failed, %d disabled, highest=%s, exit code %d",
            output.num_rules_passed,
            output.num_rules_failed,
            output.num_rules_disabled,
            highest,
            output.exit_code,
        )
