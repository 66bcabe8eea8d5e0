"""Per-rule results and the final output of a run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Literal, TypeAlias

from packagelint.domain.model.error_levels import ErrorLevel

if TYPE_CHECKING:
    from collections.abc import Mapping

    from packagelint.domain.model.exit_codes import ExitCode
    from packagelint.domain.model.prepared import PreparedRule


class _NotRun(Enum):
    NOT_RUN = "not-run"


NOT_RUN = _NotRun.NOT_RUN
"""Result of a disabled rule. Distinct from None, which means "ran and passed"."""


class RuleStatus(Enum):
    """Final state of one rule in a run."""

    SKIPPED = "skipped"
    PASSED = "passed"
    FAILED = "failed"
    EXCEPTED = "excepted"


@dataclass(frozen=True, slots=True)
class RuleFailure:
    """Error record for a rule that failed or raised.

    Attributes:
        prepared_rule_name: Rule that produced this result
        error_level: Rule's level, or EXCEPTION if the rule raised
        error_name: Name returned by the rule. None if the rule raised
        error_data: Diagnostic data returned by the rule. None if the rule raised
        message: Rendered message
    """

    prepared_rule_name: str
    error_level: ErrorLevel
    error_name: str | None
    error_data: Mapping[str, Any] | None
    message: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.prepared_rule_name:
            raise ValueError("prepared_rule_name must not be empty")
        if self.error_name is None:
            if self.error_data is not None:
                raise ValueError("exception results carry no error_data")
            if self.error_level is not ErrorLevel.EXCEPTION:
                raise ValueError("exception results must have error_level EXCEPTION")
        elif not self.error_name:
            raise ValueError("error_name must not be empty")

    @property
    def is_exception(self) -> bool:
        """True if the rule implementation raised.

        A rule configured at EXCEPTION level can still fail normally, so this
        looks at error_name rather than the level.
        """
        return self.error_name is None


ValidationResult: TypeAlias = "RuleFailure | None | Literal[_NotRun.NOT_RUN]"


def rule_status(result: ValidationResult) -> RuleStatus:
    """Classify a raw result."""
    if result is NOT_RUN:
        return RuleStatus.SKIPPED
    if result is None:
        return RuleStatus.PASSED
    if result.is_exception:
        return RuleStatus.EXCEPTED
    return RuleStatus.FAILED


@dataclass(frozen=True, slots=True)
class ValidationOutput:
    """Outcome of one engine run.

    Immutable aggregate passed to on_validation_complete and returned to the caller.

    Attributes:
        num_rules_enabled: Rules that ran
        num_rules_disabled: Rules skipped because disabled
        num_rules_passed: Enabled rules without a failure
        num_rules_failed: Enabled rules that failed or raised
        exit_code: SUCCESS or FAILURE_VALIDATION
        highest_error_level: Most severe failure level, None if nothing failed
        error_level_counts: Failures per level, every level present
        rules: Prepared rules, in run order
        all_results: One raw result per rule, same order as rules
        error_results: Failures only, in run order
    """

    num_rules_enabled: int
    num_rules_disabled: int
    num_rules_passed: int
    num_rules_failed: int
    exit_code: ExitCode
    highest_error_level: ErrorLevel | None
    error_level_counts: Mapping[ErrorLevel, int]
    rules: tuple[PreparedRule, ...]
    all_results: tuple[ValidationResult, ...]
    error_results: tuple[RuleFailure, ...] = field(default=())

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        counters = (
            "num_rules_enabled",
            "num_rules_disabled",
            "num_rules_passed",
            "num_rules_failed",
        )
        for attr in counters:
            value = getattr(self, attr)
            if value < 0:
                raise ValueError(f"{attr} must be >= 0, got {value}")

        if len(self.rules) != len(self.all_results):
            raise ValueError(
                f"rules and all_results must align, "
                f"got {len(self.rules)} and {len(self.all_results)}"
            )
        if self.num_rules_enabled + self.num_rules_disabled != len(self.all_results):
            raise ValueError("enabled + disabled must equal the number of results")
        if self.num_rules_passed + self.num_rules_failed != self.num_rules_enabled:
            raise ValueError("passed + failed must equal enabled")
        if self.num_rules_failed != len(self.error_results):
            raise ValueError("num_rules_failed must equal the number of error_results")

        counts = MappingProxyType(dict(self.error_level_counts))
        object.__setattr__(self, "error_level_counts", counts)

    @property
    def passed(self) -> bool:
        """True if no enabled rule failed."""
        return self.num_rules_failed == 0
