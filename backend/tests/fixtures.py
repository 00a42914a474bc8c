"""Shared test helpers."""

from uuid import uuid4

from tasklog.models import TASK_ADDED, TASK_COMPLETED, TaskEvent


def make_task_uri() -> str:
    return f"urn:task:{uuid4()}"


def make_task_added(uri: str | None = None, title: str = "Buy milk") -> TaskEvent:
    """Create a task-added event for testing."""
    return TaskEvent(name=TASK_ADDED, task_uri=uri or make_task_uri(), task_title=title)


def make_task_completed(uri: str, title: str = "Buy milk") -> TaskEvent:
    """Create a task-completed event for testing.

    Carries a title because the projector only accepts fully shaped events.
    """
    return TaskEvent(name=TASK_COMPLETED, task_uri=uri, task_title=title)
