"""
Route adapter - Bridges FastAPI requests to framework-agnostic controllers.

Controllers only know HttpRequest/HttpResponse. This module turns a
controller into a FastAPI endpoint and renders its response as JSON:

- 2xx: the body itself (dataclasses are converted with asdict)
- anything else: {"error": <message>} built from the error body
"""

import json
from collections.abc import Awaitable, Callable
from dataclasses import asdict, is_dataclass
from typing import Any

from fastapi import Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from src.presentation.http import HttpRequest, HttpResponse
from src.presentation.protocols import Controller


async def read_body(request: Request) -> dict[str, Any]:
    """
    Read the JSON object body of a request.

    Empty, undecodable or non-object bodies become an empty dict, so
    the controller reports the first missing field instead of a 422.
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {}
    return body if isinstance(body, dict) else {}


def render(response: HttpResponse) -> JSONResponse:
    """Render an HttpResponse as a JSONResponse."""
    if 200 <= response.status_code < 300:
        body = response.body
        content = asdict(body) if is_dataclass(body) and not isinstance(body, type) else body
    else:
        # str() of a presentation error is its public message; ServerError's is generic
        content = {"error": str(response.body)}
    return JSONResponse(status_code=response.status_code, content=content)


def adapt_route(
    get_controller: Callable[..., Controller],
) -> Callable[..., Awaitable[JSONResponse]]:
    """
    Build a FastAPI endpoint from a controller dependency.

    The controller is resolved per request through Depends, so tests can
    swap it with app.dependency_overrides. Its blocking handle() runs in
    the threadpool.

    Args:
        get_controller: FastAPI dependency returning the controller

    Returns:
        Async endpoint function
    """

    async def endpoint(
        request: Request,
        controller: Controller = Depends(get_controller),
    ) -> JSONResponse:
        http_request = HttpRequest(body=await read_body(request))
        http_response = await run_in_threadpool(controller.handle, http_request)
        return render(http_response)

    return endpoint
