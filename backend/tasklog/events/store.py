"""Append-only, in-memory event store."""

import logging
import threading
from typing import Any, Protocol

from tasklog.models import TaskEvent, read_task_event

logger = logging.getLogger(__name__)


class EventStore(Protocol):
    """The write side of the CQRS pattern. Anything with submit/history fits."""

    def submit(self, event: Any) -> None: ...

    def history(self) -> tuple[TaskEvent, ...]: ...


class InMemoryEventStore:
    """Process-lifetime event log, safe to share between threads.

    Appends build a new tuple and swap it in under a lock. Readers grab
    whatever tuple is current without locking, so a snapshot is never
    half written and never changes after it is handed out.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._events: tuple[TaskEvent, ...] = ()

    def submit(self, event: Any) -> None:
        """Append the event if it has a non-empty name, else drop it silently."""
        accepted = self._coerce(event)
        if accepted is None:
            logger.debug("Discarding submission without an event name: %r", event)
            return

        with self._lock:
            self._events = self._events + (accepted,)

    def history(self) -> tuple[TaskEvent, ...]:
        """Return every appended event, in arrival order."""
        return self._events

    @staticmethod
    def _coerce(event: Any) -> TaskEvent | None:
        """Read a candidate as a TaskEvent that passes the name gate, or None."""
        accepted = read_task_event(event)
        if accepted is None or not accepted.name:
            return None
        return accepted
