"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol

from .models import Account, AddAccountInput


class Encrypter(Protocol):
    """Port interface for password hashing."""

    def encrypt(self, value: str) -> str:
        """
        Turn a plaintext secret into its stored representation.

        Args:
            value: Plaintext secret

        Returns:
            Opaque hashed representation
        """
        ...


class AddAccountRepository(Protocol):
    """Port interface for account persistence."""

    def add(self, account: AddAccountInput) -> Account:
        """
        Persist a new account.

        Args:
            account: Account data with the password already hashed

        Returns:
            The stored record, including its generated id
        """
        ...


class LogErrorRepository(Protocol):
    """Port interface for durable error trace storage."""

    def log_error(self, stack: str) -> None:
        """
        Record a failure trace.

        Args:
            stack: Formatted traceback of the failure
        """
        ...


class AddAccount(Protocol):
    """Use case contract consumed by the presentation layer."""

    def add(self, account: AddAccountInput) -> Account:
        """Create an account from plaintext input."""
        ...
