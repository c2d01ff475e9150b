"""Per-session feed of player actions and outcomes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SessionEvent:
    """A single gameplay event."""

    move: int          # moves spent when the event happened
    category: str      # paint / undo / reset / won / lost / completed
    message: str


class EventLog:
    """Append-only event log owned by one session.

    Cleared whenever the session starts a level.
    """

    __slots__ = ("_buffer",)

    def __init__(self) -> None:
        self._buffer: deque[SessionEvent] = deque()

    def append(self, event: SessionEvent) -> None:
        self._buffer.append(event)

    def by_category(self, category: str) -> list[SessionEvent]:
        return [e for e in self._buffer if e.category == category]

    def latest(self, count: int = 50) -> list[SessionEvent]:
        """Return the *count* most recent events."""
        items = list(self._buffer)
        return items[-count:]

    def clear(self) -> None:
        self._buffer.clear()

    def __len__(self) -> int:
        return len(self._buffer)
