"""
Controller decorators - Cross-cutting behaviour around controllers.

A decorator implements the same Controller contract as the object it
wraps, so it can be nested or substituted anywhere a plain controller
is expected.
"""

import logging

from src.domain.ports import LogErrorRepository
from src.presentation.http import HttpRequest, HttpResponse
from src.presentation.protocols import Controller

logger = logging.getLogger(__name__)


class LogControllerDecorator:
    """
    Persists the stack of every server error produced by a controller.

    The wrapped controller's response is always returned unchanged. If
    the error sink itself fails, the failure is logged and swallowed:
    a lost trace must not turn into a different response.
    """

    def __init__(self, controller: Controller, log_error_repository: LogErrorRepository) -> None:
        self._controller = controller
        self._log_error_repository = log_error_repository

    def handle(self, request: HttpRequest) -> HttpResponse:
        response = self._controller.handle(request)

        if response.status_code == 500:
            stack = getattr(response.body, "stack", None)
            if stack:
                self._log_error(stack)

        return response

    def _log_error(self, stack: str) -> None:
        try:
            self._log_error_repository.log_error(stack)
        except Exception:
            logger.exception("Failed to record server error trace")
