"""Reporter broadcaster: fan a lifecycle event out to every reporter.

Hooks are invoked in reporter-registration order; async hooks then settle
concurrently. A failing reporter is captured, logged and reported back as
data. It never stops delivery to the others and never aborts the run.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from packagelint.domain.ports.reporter import LIFECYCLE_EVENTS

if TYPE_CHECKING:
    from collections.abc import Iterable

    from packagelint.domain.model.prepared import PreparedConfig
    from packagelint.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BroadcastOutcome:
    """Outcome of one reporter hook call.

    Attributes:
        reporter: Reporter whose hook was called
        event: Lifecycle event name
        value: Hook return value (awaited). None on failure
        error: Exception the hook raised, or None
    """

    reporter: ReporterProtocol
    event: str
    value: Any = None
    error: Exception | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.event not in LIFECYCLE_EVENTS:
            raise ValueError(f"unknown lifecycle event {self.event!r}")
        if self.error is not None and self.value is not None:
            raise ValueError("a failed hook call has no value")

    @property
    def failed(self) -> bool:
        """True if the hook raised."""
        return self.error is not None


def _describe(reporter: ReporterProtocol) -> str:
    return type(reporter).__name__


async def _call_hook(reporter: ReporterProtocol, event: str, args: tuple[Any, ...]) -> Any:
    value = getattr(reporter, event)(*args)
    if inspect.isawaitable(value):
        value = await value
    return value


async def _settle(
    reporter: ReporterProtocol,
    event: str,
    args: tuple[Any, ...],
) -> BroadcastOutcome:
    try:
        value = await _call_hook(reporter, event, args)
    # Reporter code may raise anything; isolate it from the run.
    except Exception as exc:
        logger.warning(
            "Reporter %s failed in %s: %s: %s",
            _describe(reporter),
            event,
            type(exc).__name__,
            exc,
        )
        return BroadcastOutcome(reporter=reporter, event=event, error=exc)
    return BroadcastOutcome(reporter=reporter, event=event, value=value)


async def broadcast_event_using_reporters(
    reporters: Iterable[ReporterProtocol],
    event: str,
    *args: Any,
) -> list[BroadcastOutcome]:
    """Invoke event on every reporter that implements it.

    Args:
        reporters: Reporter instances, in registration order.
        event: One of LIFECYCLE_EVENTS.
        *args: Arguments passed to each hook.

    Returns:
        One outcome per reporter that implements the hook, in reporter order.

    Raises:
        ValueError: If event is not a lifecycle event.
    """
    if event not in LIFECYCLE_EVENTS:
        raise ValueError(f"unknown lifecycle event {event!r}")

    listeners = [reporter for reporter in reporters if callable(getattr(reporter, event, None))]
    if not listeners:
        return []

    # Tasks start in list order, so hooks are entered in registration order.
    return list(await asyncio.gather(*(_settle(reporter, event, args) for reporter in listeners)))


async def broadcast_event(
    prepared_config: PreparedConfig,
    event: str,
    *args: Any,
) -> list[BroadcastOutcome]:
    """Broadcast event to the reporters of a prepared config."""
    return await broadcast_event_using_reporters(prepared_config.reporters, event, *args)
