"""Helpers shared by the resource services."""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence, Union
from urllib.parse import urlencode

from ..context import RequestContext
from ..errors import MissingParameterError
from ..http_client import JiraHTTPClient
from ..models import ResponseScheme

ParamValue = Union[str, int, bool, Sequence[Union[str, int]]]

_NO_PAYLOAD = object()


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_params(params: Mapping[str, ParamValue] | Iterable[tuple[str, Any]]) -> str:
    """URL-encode query parameters sorted by key.

    Sequence values repeat the key once per item, in order.  Keys are sorted so
    endpoints are deterministic.
    """

    items = params.items() if isinstance(params, Mapping) else params
    pairs: list[tuple[str, str]] = []
    for key, value in items:
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _format(item)) for item in value)
        else:
            pairs.append((key, _format(value)))
    pairs.sort(key=lambda pair: pair[0])
    return urlencode(pairs)


def with_query(path: str, params: Mapping[str, ParamValue] | Iterable[tuple[str, Any]] | None) -> str:
    query = encode_params(params) if params else ""
    return f"{path}?{query}" if query else path


def require(value: Any, message: str) -> None:
    if not value:
        raise MissingParameterError(message)


class Service:
    """Base class binding a service to a client and an API version."""

    def __init__(self, client: JiraHTTPClient, version: str) -> None:
        if not version:
            raise MissingParameterError("no module version set")
        self._client = client
        self._version = version

    def _path(self, suffix: str) -> str:
        return f"rest/api/{self._version}/{suffix}"

    def _call(
        self,
        ctx: Optional[RequestContext],
        method: str,
        endpoint: str,
        payload: Any = _NO_PAYLOAD,
        model: Any = None,
    ) -> tuple[Any, ResponseScheme]:
        body = None if payload is _NO_PAYLOAD else self._client.encode_payload(payload)
        request = self._client.new_request(ctx, method, endpoint, body=body)
        return self._client.call(request, model)


__all__ = ["Service", "encode_params", "require", "with_query"]
