"""Event sourcing: append-only event store and task projection."""

from tasklog.events.projector import TaskProjector, project
from tasklog.events.store import EventStore, InMemoryEventStore

__all__ = ["EventStore", "InMemoryEventStore", "TaskProjector", "project"]
