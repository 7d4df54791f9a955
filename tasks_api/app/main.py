"""
Main entrypoint for the Tasks API.

This module assembles the FastAPI application, sets up logging,
registers the exception handlers and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, so it can be served
with::

    uvicorn tasks_api.app.main:app
"""

from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.task_service import TaskService


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Every call returns an application with its own, empty
    ``TaskService`` stored on ``app.state``.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the rest of the
    # setup can safely log messages.
    setup_logging(settings)

    # Paths are matched exactly; "/tasks/list/" is not "/tasks/list".
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.task_service = TaskService()

    register_exception_handlers(app)
    app.include_router(router)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
