"""
Domain models - Account records and account creation input.

Plain dataclasses with zero framework imports, shared by the
use case, the presentation layer and the repository adapters.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AddAccountInput:
    """Data required to create an account. Password is plaintext here."""

    name: str
    email: str
    password: str


@dataclass(frozen=True)
class Account:
    """
    Persisted account record.

    The id is assigned by the repository on insert and the password
    holds the hashed representation, never the plaintext.
    """

    id: str
    name: str
    email: str
    password: str
