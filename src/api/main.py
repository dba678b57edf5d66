"""
Sign-up service application.

create_app() assembles the FastAPI app. Its lifespan owns every
long-lived object: the connection pool, the schema, and the decorated
sign-up controller, which is composed once and shared by all requests
through app.state.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.adapter import render
from src.api.dependencies import get_pool
from src.api.factories import make_signup_controller
from src.api.routes import router
from src.config.settings import get_settings
from src.presentation.http import ok

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the pool, prepare tables and wire the sign-up controller."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
        open=True,
    )
    try:
        if settings.apply_migrations:
            run_migrations(pool)

        app.state.pool = pool
        app.state.signup_controller = make_signup_controller(pool, settings)
        logger.info("Sign-up service ready (bcrypt cost %d)", settings.bcrypt_cost)

        yield
    finally:
        pool.close()
        logger.info("Database connection pool closed")


async def health_check(pool: ConnectionPool = Depends(get_pool)) -> JSONResponse:
    """200 when the accounts database answers, otherwise the error propagates."""
    with pool.connection() as conn:
        conn.execute("SELECT 1")

    return render(ok({"status": "healthy"}))


def create_app() -> FastAPI:
    """Build the sign-up FastAPI application."""
    app = FastAPI(
        title="signup-service",
        description="Sign-up API - Layered account creation with server error logging",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(router, prefix="/api")
    app.add_api_route("/health", health_check, methods=["GET"], response_model=None)
    return app


app = create_app()
