"""
HTTP shapes and response helpers.

The helpers below are the only way controllers build responses,
which keeps status codes and body types consistently paired.
"""

import traceback
from dataclasses import dataclass, field
from typing import Any

from .errors import ServerError


@dataclass
class HttpRequest:
    """Inbound request. Only the body is consumed by controllers."""

    body: dict[str, Any] = field(default_factory=dict)


@dataclass
class HttpResponse:
    """Outbound response. 4xx/5xx bodies are PresentationError instances."""

    status_code: int
    body: Any = None


def bad_request(error: Exception) -> HttpResponse:
    """400 carrying the client error."""
    return HttpResponse(status_code=400, body=error)


def ok(payload: Any) -> HttpResponse:
    """200 carrying the payload."""
    return HttpResponse(status_code=200, body=payload)


def created(payload: Any) -> HttpResponse:
    """201 carrying the created resource."""
    return HttpResponse(status_code=201, body=payload)


def server_error(error: BaseException | None = None) -> HttpResponse:
    """
    500 carrying a ServerError.

    When an error is given, its formatted traceback becomes the
    ServerError stack so a logging decorator can persist it.
    """
    stack = None
    if error is not None:
        stack = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    return HttpResponse(status_code=500, body=ServerError(stack))
