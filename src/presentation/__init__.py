"""
Presentation layer - Framework-agnostic controllers and HTTP shapes.

Controllers translate an inbound HttpRequest into use case calls and
map every outcome to an HttpResponse. Nothing here imports FastAPI;
the api package adapts these types to real HTTP.
"""

from .errors import InvalidParamError, MissingParamError, PresentationError, ServerError
from .http import HttpRequest, HttpResponse, bad_request, created, ok, server_error
from .protocols import Controller, EmailValidator

__all__ = [
    "Controller",
    "EmailValidator",
    "HttpRequest",
    "HttpResponse",
    "InvalidParamError",
    "MissingParamError",
    "PresentationError",
    "ServerError",
    "bad_request",
    "created",
    "ok",
    "server_error",
]
