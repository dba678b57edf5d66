"""
Domain layer - Pure business logic with zero framework imports.

This package contains the account model, the add-account use case and
the port interfaces it depends on, ensuring true hexagonal architecture
decoupling from the database and hashing libraries.
"""

from .add_account import DbAddAccount
from .models import Account, AddAccountInput
from .ports import AddAccount, AddAccountRepository, Encrypter, LogErrorRepository

__all__ = [
    "Account",
    "AddAccount",
    "AddAccountInput",
    "AddAccountRepository",
    "DbAddAccount",
    "Encrypter",
    "LogErrorRepository",
]
