"""Reporter protocol: observers of a validation run.

Users extend packagelint by implementing any subset of these hooks.
Hooks may be plain methods or coroutines. A hook that raises is isolated:
it never aborts the run or affects rule results.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from packagelint.domain.model.prepared import PreparedConfig, PreparedRule
    from packagelint.domain.model.results import ValidationOutput, ValidationResult

LIFECYCLE_EVENTS: tuple[str, ...] = (
    "on_validation_start",
    "on_rule_start",
    "on_rule_result",
    "on_validation_complete",
)


class ReporterProtocol(Protocol):
    """Contract for reporters.

    Every hook is optional: the broadcaster skips reporters that lack one.
    Reporters are constructed with their user-supplied options mapping.

    Order guarantees within one run:
    1. on_validation_start, fully settled before any rule starts
    2. per enabled rule: on_rule_start, then on_rule_result
    3. on_validation_complete, after every rule has settled

    Example:
        class CountingReporter:
            def __init__(self, options: Mapping[str, object]) -> None:
                self.failures = 0

            def on_rule_result(self, rule: PreparedRule, result: ValidationResult) -> None:
                if result is not None:
                    self.failures += 1
    """

    def on_validation_start(self, prepared_config: PreparedConfig) -> Awaitable[None] | None:
        """Called once, before any rule runs."""
        ...

    def on_rule_start(self, rule: PreparedRule) -> Awaitable[None] | None:
        """Called before an enabled rule runs."""
        ...

    def on_rule_result(
        self,
        rule: PreparedRule,
        result: ValidationResult,
    ) -> Awaitable[None] | None:
        """Called after an enabled rule settles, with its result."""
        ...

    def on_validation_complete(self, output: ValidationOutput) -> Awaitable[None] | None:
        """Called once, after every rule has settled."""
        ...
