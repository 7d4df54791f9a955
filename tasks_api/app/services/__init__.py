"""
Service layer.

Services own the application state and expose plain methods that the
API handlers call.  Handlers never touch the stored data directly.
"""
