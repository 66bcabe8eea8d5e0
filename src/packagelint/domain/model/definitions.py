"""Rule and ruleset definitions exported by plugin modules."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from packagelint.application.validate.context import ValidationContext
    from packagelint.domain.model.entries import RuleEntry
    from packagelint.domain.model.error_levels import ErrorLevel

ErrorData: TypeAlias = dict[str, Any]
ValidationFnReturn: TypeAlias = "tuple[str, ErrorData] | None"
ValidationFn: TypeAlias = (
    "Callable[[dict[str, Any], ValidationContext],"
    " ValidationFnReturn | Awaitable[ValidationFnReturn]]"
)


def _frozen(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True, slots=True)
class RuleDefinition:
    """Underlying implementation of a rule.

    Merged with rule entries to form a PreparedRule.

    Attributes:
        name: Identifier, unique within the declaring module
        do_validation: Check function, sync or async:
            (options, context) -> None | (error_name, error_data)
        docs: Human-readable information ("description", "url", ...)
        default_error_level: Level when no entry overrides it. None = engine default
        default_options: Options when no entry overrides them
        messages: error_name -> human-readable message
        is_abstract: Must be extended (extend_rule) before use. For generic
            rules that are used several times with different options.
    """

    name: str
    do_validation: ValidationFn
    docs: Mapping[str, str] = field(default_factory=dict)
    default_error_level: ErrorLevel | None = None
    default_options: Mapping[str, Any] = field(default_factory=dict)
    messages: Mapping[str, str] = field(default_factory=dict)
    is_abstract: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not callable(self.do_validation):
            got = type(self.do_validation).__name__
            raise TypeError(f"do_validation must be callable, got {got}")
        if self.default_options is None:
            raise TypeError("default_options must not be None")
        if self.messages is None:
            raise TypeError("messages must not be None")

        # frozen: bypass __setattr__ to store read-only copies
        object.__setattr__(self, "docs", _frozen(self.docs))
        object.__setattr__(self, "default_options", _frozen(self.default_options))
        object.__setattr__(self, "messages", _frozen(self.messages))

    @property
    def description(self) -> str:
        """Short description from docs, empty if absent."""
        return self.docs.get("description", "")


@dataclass(frozen=True, slots=True)
class RulesetDefinition:
    """Named, ordered group of rule and ruleset entries.

    Attributes:
        name: Identifier, unique within the declaring module
        rules: Entries, expanded in order. May name further rulesets.
        docs: Human-readable information
    """

    name: str
    rules: tuple[RuleEntry, ...]
    docs: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if isinstance(self.rules, (str, bytes)):
            raise TypeError("rules must be a sequence of entries, not a string")

        object.__setattr__(self, "rules", tuple(self.rules))
        object.__setattr__(self, "docs", _frozen(self.docs))


def is_rule_definition(value: object) -> bool:
    """Check whether value is a RuleDefinition."""
    return isinstance(value, RuleDefinition)


def is_ruleset_definition(value: object) -> bool:
    """Check whether value is a RulesetDefinition."""
    return isinstance(value, RulesetDefinition)
