"""Controllers - One class per endpoint."""

from .signup import SignUpController

__all__ = ["SignUpController"]
