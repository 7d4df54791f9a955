"""
Request dependencies shared by the task endpoints.

``task_id_param`` and ``json_body`` decode the two inputs an endpoint
can take.  FastAPI resolves dependencies in declaration order, so an
endpoint listing the ID before the body reports ``Invalid task ID``
even when the body is malformed too.
"""

import re
from typing import Callable, Optional, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from tasks_api.app.core.config import Settings
from tasks_api.app.core.errors import InvalidRequestBodyError, InvalidTaskIDError
from tasks_api.app.schemas.task import INT64_MAX, INT64_MIN
from tasks_api.app.services.task_service import TaskService

ModelT = TypeVar("ModelT", bound=BaseModel)

_INT_RE = re.compile(r"[+-]?[0-9]+")


def get_task_service(request: Request) -> TaskService:
    return request.app.state.task_service


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def parse_task_id(raw: Optional[str]) -> int:
    """Parse a base-10 signed 64-bit integer.

    Raises ``InvalidTaskIDError`` for a missing or empty value, anything
    other than an optional sign followed by ASCII digits, or a value
    outside the int64 range.
    """
    if raw is None or not _INT_RE.fullmatch(raw):
        raise InvalidTaskIDError()
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidTaskIDError()
    return value


def task_id_param(request: Request) -> int:
    """Parse the first ``id`` query parameter; repeats are ignored."""
    values = request.query_params.getlist("id")
    return parse_task_id(values[0] if values else None)


def json_body(model: Type[ModelT]) -> Callable:
    """Build a dependency decoding the raw request body into ``model``.

    The body is read as JSON whatever the ``Content-Type`` header says.
    Any decoding or validation failure becomes ``InvalidRequestBodyError``.
    """

    async def dependency(request: Request) -> ModelT:
        raw = await request.body()
        # Earlier releases stopped at the first JSON value and accepted
        # trailing bytes after it; those bodies are now rejected.
        try:
            return model.model_validate_json(raw)
        except ValidationError as exc:
            raise InvalidRequestBodyError() from exc

    return dependency
