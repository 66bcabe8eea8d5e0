"""User configuration: the single input to config preparation.

Nothing is loaded or evaluated unless it is named here, directly or through a ruleset.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from packagelint.domain.exceptions import InvalidConfigError
from packagelint.domain.model.error_levels import DEFAULT_ERROR_LEVEL, ErrorLevel

if TYPE_CHECKING:
    from packagelint.domain.model.entries import RuleEntry
    from packagelint.domain.ports.preparer import RulePreparerProtocol
    from packagelint.domain.ports.validator import RuleValidatorProtocol


@dataclass(frozen=True, slots=True)
class UserConfig:
    """Unprocessed configuration.

    Immutable. Container shapes are validated FAIL-FIRST here; names, levels
    and entries are validated during preparation.

    Attributes:
        fail_on_error_level: Fail the run if any rule fails at or above this level.
        rules: Rule and ruleset entries, shorthand or full form.
        reporters: Reporter name -> options passed to its constructor.
        rule_preparer: Factory for a custom preparer. None = DefaultRulePreparer.
        rule_validator: Factory for a custom validator. None = DefaultRuleValidator.
            Internal implementation, for forks and hotfixes only.
    """

    fail_on_error_level: ErrorLevel | str = DEFAULT_ERROR_LEVEL
    rules: tuple[RuleEntry, ...] = ()
    reporters: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    rule_preparer: Callable[[], RulePreparerProtocol] | None = None
    rule_validator: Callable[[], RuleValidatorProtocol] | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.rules, (tuple, list)):
            raise InvalidConfigError(
                f"rules must be a list of entries, got {type(self.rules).__name__}"
            )
        if not isinstance(self.reporters, Mapping):
            raise InvalidConfigError(
                f"reporters must be a mapping, got {type(self.reporters).__name__}"
            )
        for reporter_name, options in self.reporters.items():
            if not isinstance(reporter_name, str) or not reporter_name:
                raise InvalidConfigError(
                    f"reporter name must be a non-empty string, got {reporter_name!r}"
                )
            if options is not None and not isinstance(options, Mapping):
                raise InvalidConfigError(
                    f"options for reporter {reporter_name!r} must be a mapping"
                )
        if self.rule_preparer is not None and not callable(self.rule_preparer):
            raise InvalidConfigError("rule_preparer must be callable")
        if self.rule_validator is not None and not callable(self.rule_validator):
            raise InvalidConfigError("rule_validator must be callable")

        object.__setattr__(self, "rules", tuple(self.rules))
        object.__setattr__(self, "reporters", MappingProxyType(dict(self.reporters)))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> UserConfig:
        """Build from a raw mapping, e.g. a parsed config file.

        Raises:
            InvalidConfigError: If raw is not a mapping or has unknown keys.
        """
        if not isinstance(raw, Mapping):
            raise InvalidConfigError(f"config must be a mapping, got {type(raw).__name__}")

        unknown = set(raw) - _USER_CONFIG_KEYS
        if unknown:
            raise InvalidConfigError(f"unknown config keys: {sorted(unknown)}")

        return cls(**raw)


_USER_CONFIG_KEYS = frozenset(f.name for f in fields(UserConfig))

DEFAULT_USER_CONFIG = UserConfig()
