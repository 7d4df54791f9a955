"""HTTP routes and their request dependencies."""
