"""
Top-level API router.

Aggregates the domain routers.  Paths are mounted at the root because
clients address the fixed ``/tasks/<operation>`` paths directly.
"""

from fastapi import APIRouter

from .endpoints import tasks

router = APIRouter()

# The tasks router defines the full "/tasks/..." paths itself.
router.include_router(tasks.router, tags=["tasks"])
