"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, with defaults for every field.  The defaults
reproduce the service's historical behaviour: it listens on port 8080
and answers lookups of unknown IDs with a zero-valued task and HTTP
200.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Tasks API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file written in addition to the console.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # When enabled, update/delete/get of an unknown ID answer 404
    # {"error": "Task not found"} instead of 200 with a zero-valued task.
    strict_not_found: bool = _env_flag("TASKS_STRICT_NOT_FOUND")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes defaults at class definition time, environment variables
# must be set before importing this module.
settings = Settings()
