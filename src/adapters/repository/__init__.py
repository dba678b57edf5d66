"""Repository adapters - Database implementations."""

from .postgres import PostgresAccountRepository, PostgresLogErrorRepository, run_migrations

__all__ = ["PostgresAccountRepository", "PostgresLogErrorRepository", "run_migrations"]
