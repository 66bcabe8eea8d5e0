"""Domain exceptions: all public errors of packagelint.

Configuration-time errors (InvalidConfigError and its subclasses) abort
preparation and reach the caller. Execution-time failures (rule exceptions,
reporter failures) never reach the caller: the engine converts them to data.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class PackagelintError(Exception):
    """Base for all packagelint error exceptions.

    Allows: except PackagelintError to catch all library errors.
    """


# =============================================================================
# Invalid-config
# =============================================================================


class InvalidConfigError(PackagelintError, ValueError):
    """Structural problem in the user configuration.

    Inherits ValueError for semantic correctness (bad input value).
    """


class InvalidErrorLevelError(InvalidConfigError):
    """Error level is not one of the known levels.

    Attributes:
        value: The rejected value.
    """

    def __init__(self, value: object) -> None:
        """Initialize with rejected value."""
        self.value = value
        super().__init__(f"Invalid error level: {value!r}")


class InvalidRuleEntryError(InvalidConfigError):
    """Rule or ruleset entry has an unrecognized shape.

    Attributes:
        entry: The rejected entry, as given.
        reason: Why it was rejected.
    """

    def __init__(self, entry: object, reason: str) -> None:
        """Initialize with entry and reason."""
        if not reason:
            raise ValueError("reason must not be empty")

        self.entry = entry
        self.reason = reason
        super().__init__(f"Invalid rule entry {entry!r}: {reason}")


class RuleNameCollisionError(InvalidConfigError):
    """Two unrelated entries resolve to the same prepared rule name.

    Attributes:
        prepared_rule_name: The contested name.
        existing_origin: Base rule that claimed the name first.
        new_origin: Base rule of the entry that collided.
    """

    def __init__(self, prepared_rule_name: str, existing_origin: str, new_origin: str) -> None:
        """Initialize with the contested name and both origins."""
        self.prepared_rule_name = prepared_rule_name
        self.existing_origin = existing_origin
        self.new_origin = new_origin
        super().__init__(
            f"Rule name {prepared_rule_name!r} is already used by {existing_origin!r}, "
            f"cannot reuse it for {new_origin!r}"
        )


class AbstractRuleError(InvalidConfigError):
    """Abstract rule used directly instead of through extend_rule.

    Attributes:
        rule_name: Name of the abstract rule.
    """

    def __init__(self, rule_name: str) -> None:
        """Initialize with rule name."""
        self.rule_name = rule_name
        super().__init__(
            f"Rule {rule_name!r} is abstract: use extend_rule to create a rule from it"
        )


class RulesetCycleError(InvalidConfigError):
    """Ruleset references itself, directly or transitively.

    Attributes:
        chain: Ruleset names from the outermost to the repeated one.
    """

    def __init__(self, chain: Sequence[str]) -> None:
        """Initialize with the ruleset chain."""
        if not chain:
            raise ValueError("chain must not be empty")

        self.chain = tuple(chain)
        super().__init__(f"Ruleset cycle detected: {' -> '.join(self.chain)}")


class InvalidNameError(InvalidConfigError):
    """Name is not of the form "<module>:<entity>".

    Attributes:
        name: The rejected name.
        kind: What was being resolved (rule, reporter).
    """

    def __init__(self, name: str, kind: str = "rule") -> None:
        """Initialize with rejected name and entity kind."""
        self.name = name
        self.kind = kind
        super().__init__(f"{kind.capitalize()} {name!r} is not a valid {kind} name")


class PluginImportError(InvalidConfigError):
    """Named rule, ruleset or reporter could not be loaded from its module.

    Attributes:
        module_id: Module that was being loaded.
        reason: What was missing or malformed.
    """

    def __init__(self, module_id: str, reason: str) -> None:
        """Initialize with module identifier and reason."""
        if not reason:
            raise ValueError("reason must not be empty")

        self.module_id = module_id
        self.reason = reason
        super().__init__(f"Package {module_id!r} {reason}")


class InvalidReporterOptionsError(InvalidConfigError):
    """Reporter constructor rejected the options from the user config.

    Attributes:
        reporter_name: Qualified reporter name.
        reason: Error raised by the constructor.
    """

    def __init__(self, reporter_name: str, reason: str) -> None:
        """Initialize with reporter name and reason."""
        if not reason:
            raise ValueError("reason must not be empty")

        self.reporter_name = reporter_name
        self.reason = reason
        super().__init__(f"Reporter {reporter_name!r} rejected its options: {reason}")


class ModuleLoadError(PackagelintError):
    """Module loader could not load a module.

    Raised by module loaders. NameResolver converts it to PluginImportError.

    Attributes:
        module_id: Module that failed to load.
    """

    def __init__(self, module_id: str, reason: str) -> None:
        """Initialize with module identifier and reason."""
        self.module_id = module_id
        self.reason = reason
        super().__init__(f"Cannot load {module_id!r}: {reason}")


class MissingConfigError(PackagelintError):
    """No user configuration was supplied."""

    def __init__(self) -> None:
        """Initialize with fixed message."""
        super().__init__("No packagelint configuration was given")


# =============================================================================
# Rule execution
# =============================================================================


class InvalidRuleResultError(PackagelintError, TypeError):
    """Validation function returned neither None nor an (error_name, error_data) pair.

    Converted to an exception-level result by the engine, never raised to callers.

    Attributes:
        got: Type of the returned value.
    """

    def __init__(self, got: type) -> None:
        """Initialize with actual type."""
        self.got = got
        super().__init__(
            f"Validation function must return None or (error_name, error_data), got {got.__name__}"
        )


# =============================================================================
# Internal consistency
# =============================================================================


class InternalConsistencyError(PackagelintError, RuntimeError):
    """Operation needed run state that is absent. Always a programmer error."""


class MissingPreparedConfigError(InternalConsistencyError):
    """Validator helper called when no prepared config is set.

    Attributes:
        operation: Name of the helper that was called.
    """

    def __init__(self, operation: str) -> None:
        """Initialize with operation name."""
        self.operation = operation
        super().__init__(
            f"Packagelint internal error: Cannot {operation} when no prepared_config is set"
        )


class MissingValidatorError(InternalConsistencyError):
    """Prepared config has no usable rule validator."""

    def __init__(self, reason: str) -> None:
        """Initialize with reason."""
        self.reason = reason
        super().__init__(f"Packagelint internal error: {reason}")


class InvalidExitCodeError(InternalConsistencyError):
    """Value is not one of the known exit codes.

    Attributes:
        value: The rejected value.
    """

    def __init__(self, value: object) -> None:
        """Initialize with rejected value."""
        self.value = value
        super().__init__(f"Packagelint internal error: Unknown exit code {value!r}")
