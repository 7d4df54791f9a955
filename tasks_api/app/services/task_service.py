"""
Service holding the in-memory task list.

Tasks are kept in a plain list in insertion order.  Lookups are
linear scans by ``id`` and always resolve to the first match, so when
callers create several tasks with the same identifier only the first
one is reachable through update, delete and get.  Nothing is persisted;
the list lives as long as the service instance.

All access to the list goes through a single lock, so the service can
be shared between request handlers running on the event loop and in
the threadpool.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

from tasks_api.app.core.errors import TaskNotFoundError
from tasks_api.app.schemas.task import (
    CreateTaskRequest,
    CreateTaskResponse,
    DeleteTaskRequest,
    DeleteTaskResponse,
    GetTaskRequest,
    GetTaskResponse,
    ListTasksRequest,
    ListTasksResponse,
    Task,
    UpdateTaskRequest,
    UpdateTaskResponse,
)

logger = logging.getLogger(__name__)


class TaskService:
    """Create, update, delete, get and list tasks held in memory.

    ``update_task``, ``delete_task`` and ``get_task`` return a response
    wrapping a zero-valued ``Task`` when no record matches, which cannot
    be told apart from a stored all-zero task.  Pass ``strict=True`` to
    get a ``TaskNotFoundError`` instead.
    """

    def __init__(self, tasks: Optional[List[Task]] = None) -> None:
        self._tasks: List[Task] = list(tasks or [])
        self._lock = threading.Lock()

    def _index_of(self, task_id: int) -> Optional[int]:
        # Caller must hold the lock.
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create_task(self, req: CreateTaskRequest) -> CreateTaskResponse:
        """Append ``req.task`` to the end of the list and return it.

        No identifier is generated and no collision check is made.
        """
        task = req.task.model_copy()
        with self._lock:
            self._tasks.append(task)
            count = len(self._tasks)
        logger.info("Created task %s (%d stored)", task.id, count)
        return CreateTaskResponse(task=task)

    def update_task(
        self, task_id: int, req: UpdateTaskRequest, strict: bool = False
    ) -> UpdateTaskResponse:
        """Replace the first task whose ID is ``task_id`` with ``req.updated_task``.

        The replacement overwrites every field, ``id`` included, so a
        replacement carrying a different ID moves the record out of
        reach of its old identifier.
        """
        updated = req.updated_task.model_copy()
        with self._lock:
            index = self._index_of(task_id)
            if index is not None:
                self._tasks[index] = updated
        if index is None:
            return UpdateTaskResponse(updated_task=self._missing(task_id, strict))
        if updated.id != task_id:
            logger.info("Updated task %s (now stored under id %s)", task_id, updated.id)
        else:
            logger.info("Updated task %s", task_id)
        return UpdateTaskResponse(updated_task=updated)

    def delete_task(
        self, task_id: int, req: Optional[DeleteTaskRequest] = None, strict: bool = False
    ) -> DeleteTaskResponse:
        """Remove the first task whose ID is ``task_id`` and return it."""
        with self._lock:
            index = self._index_of(task_id)
            deleted = self._tasks.pop(index) if index is not None else None
        if deleted is None:
            return DeleteTaskResponse(deleted_task=self._missing(task_id, strict))
        logger.info("Deleted task %s", task_id)
        return DeleteTaskResponse(deleted_task=deleted)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_task(
        self, task_id: int, req: Optional[GetTaskRequest] = None, strict: bool = False
    ) -> GetTaskResponse:
        """Return the first task whose ID is ``task_id``."""
        with self._lock:
            index = self._index_of(task_id)
            task = self._tasks[index] if index is not None else None
        if task is None:
            return GetTaskResponse(task=self._missing(task_id, strict))
        return GetTaskResponse(task=task)

    def list_tasks(self, req: Optional[ListTasksRequest] = None) -> ListTasksResponse:
        """Return every stored task in insertion order."""
        with self._lock:
            tasks = list(self._tasks)
        return ListTasksResponse(tasks=tasks)

    def reset(self) -> None:
        """Drop all stored tasks."""
        with self._lock:
            self._tasks.clear()

    @staticmethod
    def _missing(task_id: int, strict: bool) -> Task:
        if strict:
            raise TaskNotFoundError(task_id)
        logger.debug("No task with id %s", task_id)
        return Task()
