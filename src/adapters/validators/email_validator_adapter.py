"""
Email validator adapter - Implements EmailValidator protocol.

Delegates syntax checking to the email-validator library, the same
library behind pydantic's EmailStr. Deliverability (DNS) checks are
disabled: only the address syntax is judged.
"""

from email_validator import EmailNotValidError, validate_email


class EmailValidatorAdapter:
    """
    Implements EmailValidator protocol via email-validator.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def is_valid(self, email: str) -> bool:
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True
