"""Typed client for the Jira Cloud REST API."""

from __future__ import annotations

from .context import RequestContext, background
from .errors import (
    DecodeError,
    InvalidEndpointError,
    InvalidStatusCodeError,
    JiraError,
    MissingContextError,
    MissingParameterError,
    NilPayloadError,
    NonPayloadPointerError,
    PayloadError,
    RequestCancelledError,
    ResponseError,
)
from .http_client import JiraHTTPClient, encode_payload
from .jira_api import JiraAPI
from .models import ResponseScheme

__all__ = [
    "DecodeError",
    "InvalidEndpointError",
    "InvalidStatusCodeError",
    "JiraAPI",
    "JiraError",
    "JiraHTTPClient",
    "MissingContextError",
    "MissingParameterError",
    "NilPayloadError",
    "NonPayloadPointerError",
    "PayloadError",
    "RequestCancelledError",
    "RequestContext",
    "ResponseError",
    "ResponseScheme",
    "background",
    "encode_payload",
]
