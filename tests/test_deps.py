"""Tests for task ID parsing and configuration helpers."""

import pytest

from tasks_api.app.api.deps import parse_task_id
from tasks_api.app.core.config import Settings, _env_flag
from tasks_api.app.core.errors import InvalidTaskIDError
from tasks_api.app.main import create_app


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("0", 0),
        ("42", 42),
        ("-3", -3),
        ("+3", 3),
        ("007", 7),
        ("9223372036854775807", 2**63 - 1),
        ("-9223372036854775808", -(2**63)),
    ],
)
def test_parse_task_id_accepts_int64(raw, expected):
    assert parse_task_id(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [None, "", "-", "1e3", "0x1f", "1_000", "12a", "٣", "9223372036854775808", "-9223372036854775809"],
)
def test_parse_task_id_rejects(raw):
    with pytest.raises(InvalidTaskIDError) as excinfo:
        parse_task_id(raw)
    assert excinfo.value.message == "Invalid task ID"
    assert excinfo.value.status_code == 400


@pytest.mark.parametrize("value, expected", [("1", True), ("TRUE", True), ("yes", True), ("0", False), ("off", False)])
def test_env_flag(monkeypatch, value, expected):
    monkeypatch.setenv("TASKS_TEST_FLAG", value)
    assert _env_flag("TASKS_TEST_FLAG") is expected


def test_create_app_uses_given_settings():
    settings = Settings(project_name="Custom", strict_not_found=True)
    app = create_app(settings)
    assert app.title == "Custom"
    assert app.state.settings.strict_not_found is True
