"""Request and response schemas for task endpoints."""

from pydantic import BaseModel

# -- Requests --


class TaskEventRequest(BaseModel):
    """Body for POST /tasks/added and POST /tasks/completed."""

    uri: str
    title: str


# -- Responses --


class TaskResponse(BaseModel):
    uri: str
    title: str
