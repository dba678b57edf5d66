"""
Add-account use case - Account creation orchestration.

Hashes the plaintext password through the Encrypter port and stores
the account through the repository port. Input validation belongs to
the controller; failures from either port propagate unchanged.
"""

from dataclasses import dataclass

from .models import Account, AddAccountInput
from .ports import AddAccountRepository, Encrypter


@dataclass
class DbAddAccount:
    """
    Database-backed implementation of the AddAccount use case.

    Stateless between calls; all collaborators are injected.
    """

    encrypter: Encrypter
    add_account_repository: AddAccountRepository

    def add(self, account: AddAccountInput) -> Account:
        """
        Create an account.

        Args:
            account: Name, email and plaintext password

        Returns:
            Exactly the record returned by the repository
        """
        hashed_password = self.encrypter.encrypt(account.password)
        return self.add_account_repository.add(
            AddAccountInput(
                name=account.name,
                email=account.email,
                password=hashed_password,
            )
        )
