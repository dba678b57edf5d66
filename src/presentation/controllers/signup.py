"""
Sign-up controller - Request validation and account creation.

Validation runs in a fixed order and stops at the first failure:

1. Required fields, in REQUIRED_FIELDS order (first missing one wins)
2. Password confirmation must equal the password
3. Email syntax, delegated to the EmailValidator port

Only then is the AddAccount use case called with the plaintext
password. Any exception is converted to a generic 500 response;
handle() never raises.
"""

import logging
from dataclasses import dataclass

from src.domain.models import AddAccountInput
from src.domain.ports import AddAccount

from ..errors import InvalidParamError, MissingParamError
from ..http import HttpRequest, HttpResponse, bad_request, created, server_error
from ..protocols import EmailValidator

logger = logging.getLogger(__name__)

# Order matters: it decides which missing field is reported
REQUIRED_FIELDS = ("name", "email", "password", "passwordConfirmation")


def is_missing(value: object) -> bool:
    """
    Whether a JSON field value counts as not provided.

    Absent, null, false, zero and the empty string are missing. Arrays
    and objects, empty or not, count as provided and are left to the
    checks that follow.
    """
    if isinstance(value, (list, dict)):
        return False
    return not value


@dataclass
class SignUpController:
    """Controller for POST /api/signup."""

    email_validator: EmailValidator
    add_account: AddAccount

    def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            body = request.body
            for field_name in REQUIRED_FIELDS:
                if is_missing(body.get(field_name)):
                    return bad_request(MissingParamError(field_name))

            name = body["name"]
            email = body["email"]
            password = body["password"]

            if password != body["passwordConfirmation"]:
                return bad_request(InvalidParamError("passwordConfirmation"))

            if not self.email_validator.is_valid(email):
                return bad_request(InvalidParamError("email"))

            account = self.add_account.add(
                AddAccountInput(name=name, email=email, password=password)
            )
            return created(account)
        except Exception:
            logger.exception("Sign-up failed")
            return server_error()
