"""
FastAPI dependencies - Objects wired at startup, resolved per request.

Both live in app.state, set by the lifespan in src.api.main.
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.presentation.protocols import Controller


def get_pool(request: Request) -> ConnectionPool:
    """Get the connection pool opened at startup."""
    return request.app.state.pool


def get_signup_controller(request: Request) -> Controller:
    """Get the decorated sign-up controller composed at startup."""
    return request.app.state.signup_controller
