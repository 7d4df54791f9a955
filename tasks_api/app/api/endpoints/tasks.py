"""
API endpoints for tasks.

Each operation lives at its own fixed path under ``/tasks`` and accepts
exactly one HTTP method; any other method on the same path is answered
with a plain-text 404.  Endpoints that address a single task take its
identifier from the ``id`` query parameter.

Lookups of an unknown ID answer 200 with a zero-valued task unless the
application runs with ``strict_not_found`` enabled, in which case they
answer 404 ``{"error": "Task not found"}``.
"""

from fastapi import APIRouter, Depends

from tasks_api.app.api.deps import get_settings, get_task_service, json_body, task_id_param
from tasks_api.app.core.config import Settings
from tasks_api.app.schemas.task import (
    CreateTaskRequest,
    CreateTaskResponse,
    DeleteTaskRequest,
    DeleteTaskResponse,
    ErrorResponse,
    GetTaskRequest,
    GetTaskResponse,
    ListTasksRequest,
    ListTasksResponse,
    UpdateTaskRequest,
    UpdateTaskResponse,
)
from tasks_api.app.services.task_service import TaskService

router = APIRouter()

_BAD_ID = {400: {"model": ErrorResponse, "description": "Invalid task ID"}}
_BAD_BODY = {400: {"model": ErrorResponse, "description": "Invalid request body"}}
_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Task not found (strict mode only)"}}


@router.post(
    "/tasks/create",
    response_model=CreateTaskResponse,
    summary="Create a task",
    responses=_BAD_BODY,
)
async def create_task(
    req: CreateTaskRequest = Depends(json_body(CreateTaskRequest)),
    service: TaskService = Depends(get_task_service),
) -> CreateTaskResponse:
    """Append the task from ``{"task": {...}}`` to the list and echo it back.

    The caller supplies the ``id``; it is not checked for uniqueness and
    no field content is validated.
    """
    return service.create_task(req)


@router.get(
    "/tasks/list",
    response_model=ListTasksResponse,
    summary="List all tasks",
)
async def list_tasks(service: TaskService = Depends(get_task_service)) -> ListTasksResponse:
    """Return every task in insertion order."""
    return service.list_tasks(ListTasksRequest())


@router.put(
    "/tasks/update",
    response_model=UpdateTaskResponse,
    summary="Replace a task",
    responses={**_BAD_ID, **_NOT_FOUND},
)
async def update_task(
    task_id: int = Depends(task_id_param),
    req: UpdateTaskRequest = Depends(json_body(UpdateTaskRequest)),
    service: TaskService = Depends(get_task_service),
    settings: Settings = Depends(get_settings),
) -> UpdateTaskResponse:
    """Replace the first task with the given ID by ``updatedTask``.

    This is a full replacement, not a merge: every field is overwritten,
    including ``id``.  A malformed body answers 400 ``Invalid request body``.
    """
    return service.update_task(task_id, req, strict=settings.strict_not_found)


@router.delete(
    "/tasks/delete",
    response_model=DeleteTaskResponse,
    summary="Delete a task",
    responses={**_BAD_ID, **_NOT_FOUND},
)
async def delete_task(
    task_id: int = Depends(task_id_param),
    service: TaskService = Depends(get_task_service),
    settings: Settings = Depends(get_settings),
) -> DeleteTaskResponse:
    """Remove the first task with the given ID and return it."""
    return service.delete_task(task_id, DeleteTaskRequest(), strict=settings.strict_not_found)


@router.get(
    "/tasks/get",
    response_model=GetTaskResponse,
    summary="Get a task",
    responses={**_BAD_ID, **_NOT_FOUND},
)
async def get_task(
    task_id: int = Depends(task_id_param),
    service: TaskService = Depends(get_task_service),
    settings: Settings = Depends(get_settings),
) -> GetTaskResponse:
    return service.get_task(task_id, GetTaskRequest(), strict=settings.strict_not_found)
