"""Task projector: folds the event log into the set of open tasks.

The read side of the CQRS pattern. Pure: the same events in the same
order always produce the same tasks, and nothing is written anywhere.
"""

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from tasklog.models import (
    TASK_ADDED,
    TASK_COMPLETED,
    Task,
    TaskEvent,
    TaskEventShape,
    read_task_event,
)

logger = logging.getLogger(__name__)


class TaskProjector:
    """Replays task events into Task records keyed by uri."""

    def project(self, events: Iterable[TaskEvent]) -> list[Task]:
        """Fold events, in order, into the currently open tasks."""
        tasks: dict[str, Task] = {}
        for event in events:
            self.apply(tasks, event)
        return list(tasks.values())

    def apply(self, tasks: dict[str, Task], event: Any) -> None:
        """Apply a single event to the working state in place.

        Events that don't have the full task-event shape are skipped.
        Unknown event names fall through and change nothing.
        """
        shape = self._conform(event)
        if shape is None:
            logger.debug("Skipping malformed event: %r", event)
            return

        if shape.name == TASK_ADDED:
            self._handle_task_added(tasks, shape)
        elif shape.name == TASK_COMPLETED:
            self._handle_task_completed(tasks, shape)

    @staticmethod
    def _conform(event: Any) -> TaskEventShape | None:
        readable = read_task_event(event)
        if readable is None:
            return None
        try:
            return TaskEventShape.model_validate(readable.model_dump(by_alias=True))
        except ValidationError:
            return None

    @staticmethod
    def _handle_task_added(tasks: dict[str, Task], shape: TaskEventShape) -> None:
        """Latest add wins: drop any task with this uri, then insert fresh."""
        tasks.pop(shape.task_uri, None)
        tasks[shape.task_uri] = Task(uri=shape.task_uri, title=shape.task_title)

    @staticmethod
    def _handle_task_completed(tasks: dict[str, Task], shape: TaskEventShape) -> None:
        tasks.pop(shape.task_uri, None)


_default_projector = TaskProjector()


def project(events: Iterable[TaskEvent]) -> list[Task]:
    """Module-level shortcut for TaskProjector().project(events)."""
    return _default_projector.project(events)
