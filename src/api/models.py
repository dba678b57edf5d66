"""
API response models.

Pydantic models used for OpenAPI schema generation. Request bodies
are validated field by field by the controllers, not by a schema.
"""

from pydantic import BaseModel, Field


class SignUpRequest(BaseModel):
    """Documented request body for sign-up."""

    name: str
    email: str
    password: str
    passwordConfirmation: str = Field(..., description="Must equal password")


class AccountResponse(BaseModel):
    """Response model for a created account."""

    id: str
    name: str
    email: str
    password: str = Field(..., description="Hashed password")


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
