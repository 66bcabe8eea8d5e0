"""Rule and ruleset entries as written by users.

An entry may be given in shorthand:
- "pkg:rule": enable the rule (or expand the ruleset) with its defaults
- ("pkg:rule", False): enable or disable it
- ("pkg:rule", "warning"): enable it and set its error level
- ("pkg:rule", {"opt": 1}): enable it and set its options
- a RuleConfig, or a mapping with the same keys, for everything else
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Any, TypeAlias

from packagelint.domain.exceptions import InvalidErrorLevelError, InvalidRuleEntryError
from packagelint.domain.model.error_levels import ErrorLevel, parse_error_level


@dataclass(frozen=True, slots=True)
class RuleConfig:
    """Full override record for one rule or ruleset entry.

    Attributes:
        name: Rule to customize. With extend_rule: the new rule's identifier.
        enabled: Whether to run the rule. None = the enclosing ruleset's
            value, else True. An entry without enabled re-enables a rule that
            an earlier entry disabled.
        extend_rule: Base rule whose implementation and options are copied.
        error_level: Level the rule's failures are reported at. None = inherited.
        options: Rule-specific options, deep-merged onto the starting options.
        reset_options: With extend_rule, start from the base's original
            default options instead of its current prepared options.
        messages: error_name -> message overrides.
    """

    name: str
    enabled: bool | None = None
    extend_rule: str | None = None
    error_level: ErrorLevel | None = None
    options: Mapping[str, Any] | None = None
    reset_options: bool = False
    messages: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.name, str) or not self.name:
            raise InvalidRuleEntryError(self.name, "name must be a non-empty string")
        if self.enabled is not None and not isinstance(self.enabled, bool):
            raise InvalidRuleEntryError(self.name, "enabled must be a boolean")
        if self.extend_rule is not None and (
            not isinstance(self.extend_rule, str) or not self.extend_rule
        ):
            raise InvalidRuleEntryError(self.name, "extend_rule must be a non-empty string")
        if self.options is not None and not isinstance(self.options, Mapping):
            raise InvalidRuleEntryError(self.name, "options must be a mapping")
        if self.messages is not None and not isinstance(self.messages, Mapping):
            raise InvalidRuleEntryError(self.name, "messages must be a mapping")
        if not isinstance(self.reset_options, bool):
            raise InvalidRuleEntryError(self.name, "reset_options must be a boolean")

        if self.error_level is not None:
            object.__setattr__(self, "error_level", parse_error_level(self.error_level))
        if self.options is not None:
            object.__setattr__(self, "options", MappingProxyType(dict(self.options)))
        if self.messages is not None:
            object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    @property
    def is_extension(self) -> bool:
        """True if this entry creates a new rule from extend_rule."""
        return self.extend_rule is not None


RuleEntry: TypeAlias = (
    "str | tuple[str, bool] | tuple[str, ErrorLevel | str] | tuple[str, Mapping[str, Any]]"
    " | RuleConfig | Mapping[str, Any]"
)

_RULE_CONFIG_KEYS = frozenset(f.name for f in fields(RuleConfig))


def _from_mapping(entry: Mapping[str, Any]) -> RuleConfig:
    unknown = set(entry) - _RULE_CONFIG_KEYS
    if unknown:
        raise InvalidRuleEntryError(entry, f"unknown keys {sorted(unknown)}")
    if "name" not in entry:
        raise InvalidRuleEntryError(entry, "missing 'name'")
    return RuleConfig(**entry)


def _from_pair(entry: Sequence[Any]) -> RuleConfig:
    name, value = entry
    if not isinstance(name, str):
        raise InvalidRuleEntryError(entry, "first element must be the rule name")

    # bool first: it is the only shorthand that can disable a rule
    if isinstance(value, bool):
        return RuleConfig(name=name, enabled=value)
    if isinstance(value, (str, ErrorLevel)):
        try:
            return RuleConfig(name=name, error_level=parse_error_level(value))
        except InvalidErrorLevelError as exc:
            raise InvalidRuleEntryError(entry, f"unknown error level {value!r}") from exc
    if isinstance(value, Mapping):
        return RuleConfig(name=name, options=value)
    raise InvalidRuleEntryError(
        entry, "second element must be a boolean, an error level or an options mapping"
    )


def normalize_rule_entry(entry: object) -> RuleConfig:
    """Convert any entry shorthand into its full RuleConfig form.

    Raises:
        InvalidRuleEntryError: If entry has none of the accepted shapes.
        InvalidErrorLevelError: If a full record names an unknown level.
    """
    match entry:
        case RuleConfig():
            return entry
        case str():
            return RuleConfig(name=entry)
        case Mapping():
            return _from_mapping(entry)
        case tuple() | list() if len(entry) == 2:
            return _from_pair(entry)
        case _:
            raise InvalidRuleEntryError(entry, "unrecognized entry shape")
