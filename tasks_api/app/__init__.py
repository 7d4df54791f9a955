"""
Application package.

``main`` builds the FastAPI application, ``api`` holds the routes,
``services`` the in-memory task store, ``schemas`` the pydantic models
and ``core`` configuration, logging and error handling.
"""
