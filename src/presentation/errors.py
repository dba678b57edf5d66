"""
Presentation errors - Error values carried in HttpResponse bodies.

These are never raised across the controller boundary; they are
returned as response bodies so the status code and the error always
travel together.
"""


class PresentationError(Exception):
    """Base class for errors reported in an HTTP response body."""

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args and vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class MissingParamError(PresentationError):
    """A required request field is absent or empty."""

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Missing param: {param_name}")
        self.param_name = param_name


class InvalidParamError(PresentationError):
    """A request field is present but fails validation."""

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Invalid param: {param_name}")
        self.param_name = param_name


class ServerError(PresentationError):
    """
    Unexpected failure while handling a request.

    The message is deliberately generic. The stack, when present, is
    for server-side logging only and is never rendered to clients.
    """

    def __init__(self, stack: str | None = None) -> None:
        super().__init__("Internal server error")
        self.stack = stack
