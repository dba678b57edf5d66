"""
Unit tests for EmailValidatorAdapter.

Tests verify the adapter forwards the email unchanged to
email-validator and maps its verdict to a boolean.
"""

from unittest.mock import patch

import pytest
from email_validator import EmailNotValidError

from src.adapters.validators import EmailValidatorAdapter
from src.presentation.protocols import EmailValidator

VALIDATE = "src.adapters.validators.email_validator_adapter.validate_email"


class TestEmailValidatorAdapter:
    """Tests for email syntax checking."""

    def test_implements_email_validator_protocol(self) -> None:
        """EmailValidatorAdapter satisfies the port structurally."""

        def accepts_validator(v: EmailValidator) -> None:
            pass

        accepts_validator(EmailValidatorAdapter())
        assert EmailValidatorAdapter.__bases__ == (object,)

    def test_returns_false_if_library_rejects(self) -> None:
        """EmailNotValidError maps to False."""
        with patch(VALIDATE, side_effect=EmailNotValidError("bad")):
            assert EmailValidatorAdapter().is_valid("invalidEmail@email.com") is False

    def test_returns_true_if_library_accepts(self) -> None:
        """A successful validation maps to True."""
        with patch(VALIDATE):
            assert EmailValidatorAdapter().is_valid("validEmail@email.com") is True

    def test_calls_library_with_email(self) -> None:
        """The email is passed unchanged and deliverability is not checked."""
        with patch(VALIDATE) as validate:
            EmailValidatorAdapter().is_valid("anyEmail@email.com")

        validate.assert_called_once_with("anyEmail@email.com", check_deliverability=False)

    def test_propagates_unexpected_errors(self) -> None:
        """Errors other than EmailNotValidError are not swallowed."""
        with patch(VALIDATE, side_effect=RuntimeError("idna failure")), pytest.raises(RuntimeError):
            EmailValidatorAdapter().is_valid("anyEmail@email.com")

    @pytest.mark.parametrize(
        "email", ["vinicius@gmail.com", "first.last+tag@mail.company.org"]
    )
    def test_accepts_real_addresses(self, email: str) -> None:
        """Syntactically valid addresses pass without DNS lookups."""
        assert EmailValidatorAdapter().is_valid(email) is True

    @pytest.mark.parametrize(
        "email", ["plainaddress", "@gmail.com", "user@", "user@@gmail.com", "user name@gmail.com"]
    )
    def test_rejects_malformed_addresses(self, email: str) -> None:
        """Malformed addresses are rejected."""
        assert EmailValidatorAdapter().is_valid(email) is False
