"""
Controller factories - Composition root for the sign-up endpoint.

Wires concrete adapters into the use case and controller, then wraps
the controller with the logging decorator.
"""

from psycopg_pool import ConnectionPool

from src.adapters.cryptography import BcryptAdapter
from src.adapters.repository import PostgresAccountRepository, PostgresLogErrorRepository
from src.adapters.validators import EmailValidatorAdapter
from src.api.decorators import LogControllerDecorator
from src.config.settings import Settings
from src.domain.add_account import DbAddAccount
from src.presentation.controllers import SignUpController
from src.presentation.protocols import Controller


def make_signup_controller(pool: ConnectionPool, settings: Settings) -> Controller:
    """Create the sign-up controller with logging of server errors."""
    add_account = DbAddAccount(
        encrypter=BcryptAdapter(settings.bcrypt_cost),
        add_account_repository=PostgresAccountRepository(pool),
    )
    controller = SignUpController(
        email_validator=EmailValidatorAdapter(),
        add_account=add_account,
    )
    return LogControllerDecorator(controller, PostgresLogErrorRepository(pool))
