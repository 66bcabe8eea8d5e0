"""Reporter lifecycle broadcasting."""

from packagelint.application.reporters.broadcast import (
    BroadcastOutcome,
    broadcast_event,
    broadcast_event_using_reporters,
)

__all__ = [
    "BroadcastOutcome",
    "broadcast_event",
    "broadcast_event_using_reporters",
]
