"""Canonical data structures and event types for tasklog.

Events are the only stored records. Tasks are derived by folding the
event log and never stored on their own.
"""

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ---------------------------------------------------------------------------
# Event names
# ---------------------------------------------------------------------------

TASK_ADDED = "task-added"
TASK_COMPLETED = "task-completed"

EventName = Literal["task-added", "task-completed"]

EVENT_NAMES: frozenset[str] = frozenset({TASK_ADDED, TASK_COMPLETED})


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


class TaskEvent(BaseModel):
    """A fact about a task, as submitted to the event store.

    Every field is optional here. The store only requires a name, the
    projector requires the full shape (see TaskEventShape).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str | None = None
    task_uri: str | None = Field(default=None, alias="taskURI")
    task_title: str | None = Field(default=None, alias="taskTitle")


def read_task_event(candidate: Any) -> TaskEvent | None:
    """Read a TaskEvent out of an event, a wire-keyed mapping or a plain object.

    Returns None when nothing event-like can be read from the candidate.
    """
    if isinstance(candidate, TaskEvent):
        return candidate
    try:
        if isinstance(candidate, Mapping):
            return TaskEvent.model_validate(dict(candidate))
        return TaskEvent.model_validate(candidate, from_attributes=True)
    except (ValidationError, TypeError):
        return None


class TaskEventShape(BaseModel):
    """Full task-event shape. Events that don't fit are inert in projections."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=1)
    task_uri: str = Field(min_length=1, alias="taskURI")
    task_title: str = Field(min_length=1, alias="taskTitle")


# ---------------------------------------------------------------------------
# Projected state
# ---------------------------------------------------------------------------


class Task(BaseModel):
    """An open task. Output of the projector only."""

    model_config = ConfigDict(frozen=True)

    uri: str
    title: str
