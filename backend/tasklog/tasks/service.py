"""Task service: coordinates EventStore and TaskProjector for task operations."""

import logging

from tasklog.events.projector import TaskProjector
from tasklog.events.store import EventStore
from tasklog.models import TASK_ADDED, TASK_COMPLETED, EventName, TaskEvent
from tasklog.tasks.schemas import TaskEventRequest, TaskResponse

logger = logging.getLogger(__name__)


class TaskService:
    """Turns task requests into events and serves the projected task list."""

    def __init__(self, store: EventStore, projector: TaskProjector | None = None) -> None:
        self._store = store
        self._projector = projector or TaskProjector()

    def add_task(self, request: TaskEventRequest) -> None:
        self._record(TASK_ADDED, request)

    def complete_task(self, request: TaskEventRequest) -> None:
        self._record(TASK_COMPLETED, request)

    def list_tasks(self) -> list[TaskResponse]:
        """Replay the full history and return the open tasks."""
        tasks = self._projector.project(self._store.history())
        return [TaskResponse(uri=task.uri, title=task.title) for task in tasks]

    def _record(self, name: EventName, request: TaskEventRequest) -> None:
        event = TaskEvent(name=name, task_uri=request.uri, task_title=request.title)
        logger.debug("Submitting %s for %r", name, request.uri)
        self._store.submit(event)
