"""Error taxonomy for the automation engine client."""

from typing import Optional


class AutomateError(Exception):
    """Base class for every failure talking to the automation engine."""

    def __init__(self, detail: str, status: Optional[int] = None):
        super().__init__(detail)
        self.detail = detail
        self.status = status


class TransportError(AutomateError):
    """No response was received (connection refused, DNS, timeout...)."""
    pass


class HTTPError(AutomateError):
    """A response arrived with a non-2xx status."""
    pass


class BodyParseError(AutomateError):
    """Response body was not valid JSON where JSON was expected."""
    pass


class ActionParseError(BodyParseError):
    """An action payload could not be mapped onto a known action shape."""
    pass


class GenerationError(Exception):
    """Raised by generate_actions; the original failure is chained as __cause__."""

    MESSAGE = "Failed to generate automation actions"

    def __init__(self, cause: Optional[AutomateError] = None):
        super().__init__(self.MESSAGE)
        self.detail = cause.detail if cause is not None else None
        self.status = cause.status if cause is not None else None
