"""Tests for the shared logging setup."""

import logging

import pytest

from tasks_api.app.core.config import Settings
from tasks_api.app.core.logging_config import (
    HANDLER_NAME,
    LOG_FORMAT,
    UVICORN_LOGGERS,
    setup_logging,
)


def _own_handlers():
    return [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]


@pytest.fixture
def clean_root():
    root = logging.getLogger()
    level = root.level
    for handler in _own_handlers():
        root.removeHandler(handler)
        handler.close()
    yield root
    for handler in _own_handlers():
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)


def test_handlers_are_added_once(clean_root):
    setup_logging(Settings(log_level="DEBUG"))
    setup_logging(Settings(log_level="WARNING"))
    handlers = _own_handlers()
    assert len(handlers) == 1
    assert handlers[0].formatter._fmt == LOG_FORMAT
    assert clean_root.level == logging.WARNING


def test_unknown_level_falls_back_to_info(clean_root):
    setup_logging(Settings(log_level="chatty"))
    assert clean_root.level == logging.INFO


def test_uvicorn_loggers_propagate_to_root(clean_root):
    access = logging.getLogger("uvicorn.access")
    access.addHandler(logging.NullHandler())
    access.propagate = False

    setup_logging(Settings())

    for name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        assert server_logger.handlers == []
        assert server_logger.propagate is True


def test_log_file_receives_formatted_records(clean_root, tmp_path):
    log_file = tmp_path / "tasks.log"
    setup_logging(Settings(log_level="INFO", log_file=str(log_file)))
    assert len(_own_handlers()) == 2

    logging.getLogger("uvicorn.access").info("GET /tasks/list 200")
    for handler in _own_handlers():
        handler.flush()

    line = log_file.read_text(encoding="utf-8").splitlines()[-1]
    assert line.endswith("[INFO] uvicorn.access: GET /tasks/list 200")
