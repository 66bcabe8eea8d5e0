"""Deferred exports: values produced on first use.

A plugin may export a Deferred (or an awaitable) instead of the real value,
e.g. to postpone expensive imports until a rule is actually named.
resolve_deferred() is applied uniformly wherever an export is consumed.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass(frozen=True, slots=True)
class Deferred:
    """Zero-argument factory for an exported value.

    The factory may be a plain function or a coroutine function.

    Example:
        def _load_rules():
            from my_plugin.rules import RULES
            return RULES

        packagelint_rules = Deferred(_load_rules)
    """

    factory: Callable[[], Any | Awaitable[Any]]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not callable(self.factory):
            raise TypeError(f"factory must be callable, got {type(self.factory).__name__}")

    async def resolve(self) -> Any:
        """Invoke the factory, awaiting its result if needed."""
        value = self.factory()
        if inspect.isawaitable(value):
            value = await value
        return value


async def resolve_deferred(value: Any) -> Any:
    """Resolve one level of indirection.

    Deferred -> its factory's result; awaitable -> its result; anything
    else is returned unchanged. Callables that are not wrapped in Deferred
    are returned as-is (reporter constructors are callables).
    """
    if isinstance(value, Deferred):
        return await value.resolve()
    if inspect.isawaitable(value):
        return await value
    return value
