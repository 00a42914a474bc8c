"""tasklog FastAPI application entry point."""

import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tasklog.events.projector import TaskProjector
from tasklog.events.store import InMemoryEventStore
from tasklog.tasks.router import get_task_service
from tasklog.tasks.router import router as tasks_router
from tasklog.tasks.service import TaskService

VERSION = "0.1.0"

# Loaded at import, not in lifespan: CORS origins are read when the app is built
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


def _cors_origins() -> list[str]:
    raw = os.environ.get("TASKLOG_CORS_ORIGINS", "http://localhost:5173")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Wire a fresh in-memory event store into the task routes."""
    store = InMemoryEventStore()
    service = TaskService(store, TaskProjector())
    app.dependency_overrides[get_task_service] = lambda: service

    app.state.event_store = store
    yield

    app.dependency_overrides.pop(get_task_service, None)


app = FastAPI(
    title="tasklog",
    description="Event-sourced task list: an append-only event log folded into open tasks",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tasks_router)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok", "version": VERSION}


def run() -> None:
    """Serve the app with uvicorn, configured from TASKLOG_* env vars."""
    uvicorn.run(
        app,
        host=os.environ.get("TASKLOG_HOST", "127.0.0.1"),
        port=int(os.environ.get("TASKLOG_PORT", "3000")),
        log_level=os.environ.get("TASKLOG_LOG_LEVEL", "info"),
    )


if __name__ == "__main__":
    run()
