"""
Error taxonomy and FastAPI exception handlers.

Request-level failures are raised as ``TaskAPIError`` subclasses from
the service and dependency layers and rendered at the API edge as
``{"error": "<message>"}`` with the error's status code.  Routing
failures (unknown path or a method the path does not accept) are
rendered as a plain-text ``Not Found`` with status 404; the API never
answers 405.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class TaskAPIError(Exception):
    """Base class for errors reported to API clients as JSON."""

    message = "Internal error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidTaskIDError(TaskAPIError):
    message = "Invalid task ID"
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidRequestBodyError(TaskAPIError):
    message = "Invalid request body"
    status_code = status.HTTP_400_BAD_REQUEST


class TaskNotFoundError(TaskAPIError):
    """Raised by lookups in strict mode when no task has the given ID."""

    message = "Task not found"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__()


async def task_api_error_handler(request: Request, exc: TaskAPIError) -> JSONResponse:
    logger.warning(
        "%s %s rejected (%s): %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return PlainTextResponse("Not Found", status_code=status.HTTP_404_NOT_FOUND)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the API's exception handlers to ``app``."""
    app.add_exception_handler(TaskAPIError, task_api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
