"""FastAPI routes for recording task events and listing open tasks."""

from fastapi import APIRouter, Depends, Response, status

from tasklog.tasks.schemas import TaskEventRequest, TaskResponse
from tasklog.tasks.service import TaskService

router = APIRouter(prefix="/tasks", tags=["tasks"])


def get_task_service() -> TaskService:
    """Dependency placeholder, replaced at app startup."""
    raise RuntimeError("TaskService not initialized")


@router.get("")
def list_tasks(
    service: TaskService = Depends(get_task_service),
) -> list[TaskResponse]:
    return service.list_tasks()


@router.post("/added", status_code=status.HTTP_201_CREATED)
def task_added(
    request: TaskEventRequest,
    service: TaskService = Depends(get_task_service),
) -> Response:
    service.add_task(request)
    return Response(status_code=status.HTTP_201_CREATED)


@router.post("/completed", status_code=status.HTTP_201_CREATED)
def task_completed(
    request: TaskEventRequest,
    service: TaskService = Depends(get_task_service),
) -> Response:
    service.complete_task(request)
    return Response(status_code=status.HTTP_201_CREATED)
