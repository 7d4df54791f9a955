"""
Logging configuration for the Tasks API.

Everything the process logs shares one format: the application's own
modules as well as uvicorn's server and access logs.  Uvicorn's loggers
are stripped of their handlers and propagate to the root logger, so
``run.py`` starts uvicorn with ``log_config=None`` to keep it from
installing its own handlers again.

Handlers added here carry a fixed name.  Calling ``setup_logging``
again (every ``create_app`` call does) only adjusts levels and never
stacks duplicate handlers.
"""

import logging
from pathlib import Path
from typing import List

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_NAME = "tasks_api"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _build_handlers(settings: Settings) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(settings: Settings) -> None:
    """Configure the root logger and route uvicorn's loggers through it.

    Parameters
    ----------
    settings : Settings
        ``log_level`` sets the root level (unknown names fall back to
        ``INFO``); ``log_file``, when set, adds a file handler next to
        the console one.
    """
    root = logging.getLogger()
    if not any(handler.get_name() == HANDLER_NAME for handler in root.handlers):
        for handler in _build_handlers(settings):
            root.addHandler(handler)
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    for name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
