"""
API routes - Sign-up endpoint.

This module defines the HTTP endpoints:
- POST /api/signup - Create an account
"""

from fastapi import APIRouter, status

from src.api.adapter import adapt_route
from src.api.dependencies import get_signup_controller
from src.api.models import AccountResponse, ErrorResponse, SignUpRequest

router = APIRouter(tags=["accounts"])

router.add_api_route(
    "/signup",
    adapt_route(get_signup_controller),
    methods=["POST"],
    status_code=status.HTTP_201_CREATED,
    response_model=None,
    responses={
        201: {"model": AccountResponse, "description": "Account created"},
        400: {"model": ErrorResponse, "description": "Missing or invalid param"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Sign up a new user",
    description="Submit name, email, password and passwordConfirmation to create an account. "
    "Fields are checked in that order and the first failure is reported.",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": SignUpRequest.model_json_schema()}},
        }
    },
)
