"""
Top-level package for the Tasks API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``tasks_api.app.main:app``.
"""

__all__ = []
