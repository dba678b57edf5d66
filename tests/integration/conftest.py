"""
Fixtures for integration tests against a real PostgreSQL database.

The database is located through SIGNUP_DATABASE_URL (see Settings). Tests in
this package are skipped when it cannot be reached.
"""

from collections.abc import Generator

import psycopg
import pytest
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.config.settings import get_settings


@pytest.fixture(scope="session")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create a migrated connection pool, or skip if PostgreSQL is down."""
    settings = get_settings()
    try:
        with psycopg.connect(settings.database_url, connect_timeout=2):
            pass
    except psycopg.OperationalError as e:
        pytest.skip(f"PostgreSQL not available: {e}")

    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=5,
        open=True,
    )
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture(autouse=True)
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Clean accounts and errors tables before each test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM accounts")
        conn.execute("DELETE FROM errors")
        conn.commit()
    yield
