"""Cryptography adapters - Password hashing implementations."""

from .bcrypt_adapter import BcryptAdapter

__all__ = ["BcryptAdapter"]
