"""Exception hierarchy raised by the Jira REST client."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .models import ResponseScheme


class JiraError(Exception):
    """Base class for every error raised by :mod:`jira_rest`."""


class MissingParameterError(JiraError, ValueError):
    """A required argument was empty; raised before any network I/O."""


class RequestConstructionError(JiraError):
    """The HTTP request could not be built."""


class InvalidEndpointError(RequestConstructionError):
    """The relative endpoint could not be parsed as a URL reference."""


class MissingContextError(RequestConstructionError):
    """No request context was supplied."""

    def __init__(self, message: str = "no request context provided") -> None:
        super().__init__(message)


class RequestCancelledError(JiraError):
    """The request context was cancelled before the exchange started."""


class ResponseError(JiraError):
    """An HTTP exchange completed but its outcome is unusable.

    The buffered envelope is available on :attr:`response` so callers can
    inspect the status code and raw body.
    """

    def __init__(self, message: str, response: "ResponseScheme") -> None:
        super().__init__(message)
        self.response = response


class InvalidStatusCodeError(ResponseError):
    """The remote API answered outside of the ``2xx`` range."""

    def __init__(self, response: "ResponseScheme") -> None:
        super().__init__(
            "invalid http response status, please refer the response.body for more details",
            response,
        )


class DecodeError(ResponseError):
    """The response body could not be decoded into the requested model."""


class PayloadError(JiraError, TypeError):
    """A request payload was rejected before encoding."""


class NilPayloadError(PayloadError):
    def __init__(self, message: str = "nil payload") -> None:
        super().__init__(message)


class NonPayloadPointerError(PayloadError):
    def __init__(self, message: str = "non-payload pointer expected") -> None:
        super().__init__(message)


__all__ = [
    "DecodeError",
    "InvalidEndpointError",
    "InvalidStatusCodeError",
    "JiraError",
    "MissingContextError",
    "MissingParameterError",
    "NilPayloadError",
    "NonPayloadPointerError",
    "PayloadError",
    "RequestCancelledError",
    "RequestConstructionError",
    "ResponseError",
]
