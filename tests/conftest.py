"""Shared fixtures: a fresh application and test client per test."""

import pytest
from fastapi.testclient import TestClient

from tasks_api.app.core.config import Settings
from tasks_api.app.main import create_app
from tasks_api.app.services.task_service import TaskService

ZERO_TASK = {"id": 0, "title": "", "description": "", "done": False}


def make_task(task_id, title="T", description="D", done=False):
    return {"id": task_id, "title": title, "description": description, "done": done}


@pytest.fixture
def app():
    return create_app(Settings())


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def strict_client():
    with TestClient(create_app(Settings(strict_not_found=True))) as test_client:
        yield test_client


@pytest.fixture
def service():
    return TaskService()
