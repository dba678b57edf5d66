"""
PostgreSQL repository adapters - Implement the persistence ports.

This module provides the PostgreSQL implementations of the domain's
AddAccountRepository and LogErrorRepository ports using psycopg3
with raw, parameterized SQL.

Errors are never caught here. A duplicate email surfaces as
psycopg.errors.UniqueViolation and connectivity problems as
psycopg.OperationalError; the controller turns both into a 500.
"""

import logging
from pathlib import Path

import psycopg
from psycopg_pool import ConnectionPool

from src.domain.models import Account, AddAccountInput

logger = logging.getLogger(__name__)

# Project root: src/adapters/repository/postgres.py -> migrations/
MIGRATIONS_DIR = Path(__file__).resolve().parents[3] / "migrations"


class PostgresAccountRepository:
    """
    Implements AddAccountRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def add(self, account: AddAccountInput) -> Account:
        """
        Insert a new account and return the stored record.

        The database assigns the id; it is returned as a string so the
        Account shape does not depend on the column type.

        Args:
            account: Name, email and hashed password

        Returns:
            Account built from the inserted row
        """
        sql = """
            INSERT INTO accounts (name, email, password)
            VALUES (%s, %s, %s)
            RETURNING id, name, email, password
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (account.name, account.email, account.password))
            row = cursor.fetchone()
            conn.commit()

        return Account(id=str(row[0]), name=row[1], email=row[2], password=row[3])


class PostgresLogErrorRepository:
    """
    Implements LogErrorRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def log_error(self, stack: str) -> None:
        """Store a failure trace with the database timestamp."""
        sql = "INSERT INTO errors (stack, created_at) VALUES (%s, NOW())"

        with self._pool.connection() as conn:
            conn.execute(sql, (stack,))
            conn.commit()


def run_migrations(pool: ConnectionPool, migrations_dir: Path = MIGRATIONS_DIR) -> list[str]:
    """
    Create the accounts and errors tables.

    Applies every *.sql file in migrations_dir, sorted by name, inside a
    single transaction: either all tables exist afterwards or none of
    the files took effect. Files must be idempotent (IF NOT EXISTS).

    Args:
        pool: psycopg3 ConnectionPool instance
        migrations_dir: Directory holding the migration files

    Returns:
        Names of the applied files, in order

    Raises:
        RuntimeError: A file failed; the psycopg error is chained
    """
    sql_files = sorted(migrations_dir.glob("*.sql"))
    applied = []

    with pool.connection() as conn:
        for sql_file in sql_files:
            try:
                conn.execute(sql_file.read_text())
            except psycopg.Error as e:
                raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
            applied.append(sql_file.name)

    logger.info("Applied %d migration(s): %s", len(applied), ", ".join(applied) or "none")
    return applied
