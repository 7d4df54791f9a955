"""
Pydantic models for task records and the request/response envelopes.

Every endpoint wraps its payload in a single-key JSON object, e.g.
``{"task": {...}}`` for create/get or ``{"updatedTask": {...}}`` for
update.  The envelope classes below mirror those shapes one-to-one so
that the service layer speaks in the same terms as the wire format.

Decoding is strict about JSON types: ``"5"`` is not accepted for an
integer and ``"true"`` is not accepted for a boolean.  Missing keys and
explicit ``null`` values fall back to the field's zero value, and
unknown keys are ignored.  Keys match field names case-insensitively
(``{"Task": {"ID": 3}}`` reads as ``{"task": {"id": 3}}``); when two
spellings of one key appear, the later one wins.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class _ZeroDefaultModel(BaseModel):
    """Base model for decoded payloads.

    Object keys are matched to fields ignoring case, and ``null`` is
    decoded the same way as a missing key.
    """

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _fold_key_case(cls, data):
        if not isinstance(data, dict):
            return data
        wire_keys = {}
        for name, field in cls.model_fields.items():
            key = field.alias or name
            wire_keys[key.lower()] = key
        folded = {}
        for key, value in data.items():
            target = wire_keys.get(key.lower()) if isinstance(key, str) else None
            folded[target or key] = value
        return folded

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_zero(cls, value, info: ValidationInfo):
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class Task(_ZeroDefaultModel):
    """A single task record.

    The identifier is supplied by the caller and is never generated or
    checked for uniqueness.  A ``Task()`` built with no arguments is the
    zero-valued task returned when a lookup finds nothing.
    """

    id: int = Field(0, strict=True, ge=INT64_MIN, le=INT64_MAX)
    title: str = Field("", strict=True)
    description: str = Field("", strict=True)
    done: bool = Field(False, strict=True)


class CreateTaskRequest(_ZeroDefaultModel):
    task: Task = Field(default_factory=Task)


class CreateTaskResponse(BaseModel):
    task: Task


class UpdateTaskRequest(_ZeroDefaultModel):
    updated_task: Task = Field(default_factory=Task, alias="updatedTask")


class UpdateTaskResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    updated_task: Task = Field(default_factory=Task, alias="updatedTask")


class DeleteTaskRequest(BaseModel):
    pass


class DeleteTaskResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    deleted_task: Task = Field(default_factory=Task, alias="deletedTask")


class GetTaskRequest(BaseModel):
    pass


class GetTaskResponse(BaseModel):
    task: Task = Field(default_factory=Task)


class ListTasksRequest(BaseModel):
    pass


class ListTasksResponse(BaseModel):
    tasks: List[Task] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Body of every JSON error response."""

    error: str
