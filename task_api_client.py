"""Tasks API client.

A thin wrapper around the five ``/tasks`` endpoints built on the
``requests`` library.  Every public method returns a tuple
``(data, error)``:

* on success ``data`` holds the unwrapped payload (a task dict, or a
  list of them for :meth:`TaskAPIClient.list_tasks`) and ``error`` is
  ``None``;
* on an HTTP error ``data`` is ``None`` and ``error`` is a dict with
  keys ``status_code`` and ``message``;
* on a transport failure ``status_code`` is ``None``.

Note that the server answers lookups of unknown IDs with a zero-valued
task and HTTP 200 unless it runs in strict mode, so a successful
``get_task`` does not by itself prove the task exists.

Example::

    client = TaskAPIClient(base_url="http://localhost:8080")
    task, error = client.create_task({"id": 1, "title": "Write docs"})
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

TaskDict = Dict[str, Any]
Error = Optional[Dict[str, Any]]


class TaskAPIClient:
    """Client for the Tasks API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  Anything with a
                compatible ``request`` method may be passed, which is
                how the test suite drives an in-process app.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> Tuple[Optional[Any], Error]:
        """Perform an HTTP request and decode the JSON response.

        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
            ``data`` is the whole decoded response object.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            message = ""
            try:
                err_json = response.json()
                if isinstance(err_json, dict):
                    message = err_json.get("error") or str(err_json)
            except ValueError:
                message = response.text.strip()
            if not message:
                message = f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}

        if not response.content:
            return None, None
        try:
            return response.json(), None
        except ValueError:
            logger.error("API returned a non-JSON response for %s %s", method, url)
            return None, {"status_code": response.status_code, "message": response.text}

    def _unwrap(self, key: str, result: Tuple[Optional[Any], Error]) -> Tuple[Optional[Any], Error]:
        data, error = result
        if error is not None or data is None:
            return None, error
        return data.get(key), None

    # ------------------------------------------------------------------
    # Task operations
    # ------------------------------------------------------------------
    def create_task(self, task: TaskDict) -> Tuple[Optional[TaskDict], Error]:
        """Create a task.  ``task`` must carry its own ``id``."""
        return self._unwrap(
            "task", self._request("POST", "/tasks/create", json_body={"task": task})
        )

    def list_tasks(self) -> Tuple[Optional[List[TaskDict]], Error]:
        """Retrieve all tasks in insertion order."""
        return self._unwrap("tasks", self._request("GET", "/tasks/list"))

    def update_task(self, task_id: int, task: TaskDict) -> Tuple[Optional[TaskDict], Error]:
        """Replace the task with ID ``task_id`` by ``task`` (ID included)."""
        return self._unwrap(
            "updatedTask",
            self._request(
                "PUT",
                "/tasks/update",
                params={"id": task_id},
                json_body={"updatedTask": task},
            ),
        )

    def get_task(self, task_id: int) -> Tuple[Optional[TaskDict], Error]:
        """Fetch a single task by ID."""
        return self._unwrap(
            "task", self._request("GET", "/tasks/get", params={"id": task_id})
        )

    def delete_task(self, task_id: int) -> Tuple[Optional[TaskDict], Error]:
        """Delete a task by ID and return the removed record."""
        return self._unwrap(
            "deletedTask", self._request("DELETE", "/tasks/delete", params={"id": task_id})
        )
