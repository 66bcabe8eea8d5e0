"""Prepared rules and config: resolved, merged, ready to run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

    from packagelint.domain.model.definitions import ValidationFn
    from packagelint.domain.model.error_levels import ErrorLevel
    from packagelint.domain.ports.preparer import RulePreparerProtocol
    from packagelint.domain.ports.reporter import ReporterProtocol
    from packagelint.domain.ports.validator import RuleValidatorProtocol


@dataclass(frozen=True, slots=True)
class PreparedRule:
    """Rule definition merged with every entry that applies to it.

    Attributes:
        prepared_rule_name: Final identifier, unique across a PreparedConfig
        docs: Docs of the underlying definition
        enabled: Whether the engine runs this rule
        extended_from: Rule this one was created from via extend_rule, or None
        default_error_level: Level before entry overrides
        error_level: Level failures are reported at
        default_options: Original default options of the underlying definition
        options: Options passed to do_validation
        messages: error_name -> message, entry overrides on top of definition
        do_validation: Check function of the underlying definition
    """

    prepared_rule_name: str
    docs: Mapping[str, str]
    enabled: bool
    extended_from: str | None
    default_error_level: ErrorLevel
    error_level: ErrorLevel
    default_options: Mapping[str, Any]
    options: Mapping[str, Any]
    messages: Mapping[str, str]
    do_validation: ValidationFn

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.prepared_rule_name:
            raise ValueError("prepared_rule_name must not be empty")
        if not callable(self.do_validation):
            raise TypeError("do_validation must be callable")

    def message_for(self, error_name: str) -> str:
        """Message for error_name, falling back to the name itself."""
        return self.messages.get(error_name) or error_name


@dataclass(frozen=True, slots=True)
class PreparedConfig:
    """Configuration ready for the validation engine.

    Attributes:
        fail_on_error_level: Runs fail if any result is at or above this level
        rules: Prepared rules in accumulation order
        reporters: Reporter instances in registration order
        rule_preparer: Preparer that produced this config
        rule_validator: Validator that will execute it
    """

    fail_on_error_level: ErrorLevel
    rules: tuple[PreparedRule, ...]
    reporters: tuple[ReporterProtocol, ...]
    rule_preparer: RulePreparerProtocol | None
    rule_validator: RuleValidatorProtocol | None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        object.__setattr__(self, "rules", tuple(self.rules))
        object.__setattr__(self, "reporters", tuple(self.reporters))

        seen: set[str] = set()
        for rule in self.rules:
            if rule.prepared_rule_name in seen:
                raise ValueError(f"duplicate prepared_rule_name {rule.prepared_rule_name!r}")
            seen.add(rule.prepared_rule_name)

    def get_rule(self, prepared_rule_name: str) -> PreparedRule | None:
        """Find a prepared rule by name."""
        for rule in self.rules:
            if rule.prepared_rule_name == prepared_rule_name:
                return rule
        return None
