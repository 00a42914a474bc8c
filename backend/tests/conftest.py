"""Shared pytest fixtures for tasklog tests."""

import pytest
from httpx import ASGITransport, AsyncClient

from tasklog.events.projector import TaskProjector
from tasklog.events.store import InMemoryEventStore
from tasklog.main import app
from tasklog.tasks.router import get_task_service
from tasklog.tasks.service import TaskService


@pytest.fixture
def event_store():
    """Fresh, empty in-memory event store."""
    return InMemoryEventStore()


@pytest.fixture
def projector():
    return TaskProjector()


@pytest.fixture
def service(event_store, projector):
    return TaskService(event_store, projector)


@pytest.fixture
async def client(service):
    """Async test client with a fresh event store wired into the app."""
    app.dependency_overrides[get_task_service] = lambda: service
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
    app.dependency_overrides.clear()
