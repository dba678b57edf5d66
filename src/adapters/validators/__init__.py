"""Validator adapters - Input syntax checkers backed by libraries."""

from .email_validator_adapter import EmailValidatorAdapter

__all__ = ["EmailValidatorAdapter"]
