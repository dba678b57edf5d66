"""Presentation protocols - Controller contract and the email checker port."""

from typing import Protocol

from .http import HttpRequest, HttpResponse


class Controller(Protocol):
    """Anything that turns an HttpRequest into an HttpResponse."""

    def handle(self, request: HttpRequest) -> HttpResponse: ...


class EmailValidator(Protocol):
    """Port interface for email syntax checking."""

    def is_valid(self, email: str) -> bool:
        """
        Check whether an email address is syntactically valid.

        Args:
            email: Address exactly as submitted

        Returns:
            True if valid, False otherwise
        """
        ...
