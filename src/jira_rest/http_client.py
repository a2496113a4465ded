"""HTTP transport shared by every Jira service."""
from __future__ import annotations

import dataclasses
import functools
import io
import json
import logging
import re
from typing import IO, Any, Optional

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .auth import Authentication
from .context import RequestContext
from .errors import (
    DecodeError,
    InvalidEndpointError,
    InvalidStatusCodeError,
    MissingContextError,
    MissingParameterError,
    NilPayloadError,
    NonPayloadPointerError,
    RequestCancelledError,
)
from .models import ResponseScheme

LOGGER = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
CONTEXT_EXTENSION = "jira_rest.context"
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@functools.lru_cache(maxsize=256)
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)


def encode_payload(value: Any) -> io.BytesIO:
    """Serialise a request payload to a JSON byte stream.

    ``None`` and bare aggregates (a model class instead of an instance, or a
    tuple) are rejected.  Pydantic models and dataclasses are dumped by alias
    without unset optional values.
    """

    if value is None:
        raise NilPayloadError()
    if isinstance(value, (type, tuple)):
        raise NonPayloadPointerError()

    if isinstance(value, BaseModel):
        raw = value.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
    elif dataclasses.is_dataclass(value):
        raw = _adapter(type(value)).dump_json(value, by_alias=True, exclude_none=True)
    else:
        raw = json.dumps(value).encode("utf-8")
    return io.BytesIO(raw)


class JiraHTTPClient:
    """Builds and executes requests against a fixed Jira site."""

    def __init__(
        self,
        site: str,
        *,
        http_client: httpx.Client | None = None,
        ca_bundle: str | bool | None = None,
        timeout: tuple[float, float] = (5.0, 30.0),
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not site:
            raise MissingParameterError("no atlassian site set")
        if not site.endswith("/"):
            site += "/"
        try:
            self._site = httpx.URL(site)
        except httpx.InvalidURL as exc:
            raise InvalidEndpointError(f"invalid site {site!r}: {exc}") from exc

        if http_client is None:
            verify: str | bool
            if ca_bundle:
                verify = ca_bundle
            elif ca_bundle is False:
                verify = False
            else:
                verify = True
            http_client = httpx.Client(
                timeout=httpx.Timeout(connect=timeout[0], read=timeout[1], write=timeout[1], pool=None),
                verify=verify,
                transport=transport,
                follow_redirects=True,
            )
        self._client = http_client
        self.auth = Authentication()

    @property
    def site(self) -> httpx.URL:
        return self._site

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "JiraHTTPClient":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def resolve(self, endpoint: str) -> httpx.URL:
        """Resolve a relative endpoint against the site."""

        if _BAD_ESCAPE.search(endpoint):
            raise InvalidEndpointError(f"invalid endpoint {endpoint!r}: invalid URL escape")
        try:
            return self._site.join(endpoint)
        except (httpx.InvalidURL, ValueError) as exc:
            raise InvalidEndpointError(f"invalid endpoint {endpoint!r}: {exc}") from exc

    def new_request(
        self,
        ctx: Optional[RequestContext],
        method: str,
        endpoint: str,
        content_type: str | None = None,
        body: bytes | IO[bytes] | None = None,
    ) -> httpx.Request:
        if ctx is None:
            raise MissingContextError()

        url = self.resolve(endpoint)

        headers = {"Accept": JSON_CONTENT_TYPE, "X-Atlassian-Token": "no-check"}
        if content_type:
            headers["Content-Type"] = content_type
        elif body is not None:
            headers["Content-Type"] = JSON_CONTENT_TYPE

        if self.auth.has_basic_auth():
            headers["Authorization"] = self.auth.basic_auth_header()
        if self.auth.has_user_agent():
            headers["User-Agent"] = self.auth.user_agent

        content = body.read() if body is not None and hasattr(body, "read") else body
        timeout: Any = httpx.USE_CLIENT_DEFAULT if ctx.timeout is None else ctx.timeout
        return self._client.build_request(
            method.upper(),
            url,
            headers=headers,
            content=content,
            timeout=timeout,
            extensions={CONTEXT_EXTENSION: ctx},
        )

    def call(self, request: httpx.Request, model: Any = None) -> tuple[Any, ResponseScheme]:
        """Send ``request`` and decode the body into ``model`` when given.

        Redirects are followed; the envelope describes the final request.

        Returns ``(result, envelope)``; ``result`` is ``None`` without a model.
        """

        ctx = request.extensions.get(CONTEXT_EXTENSION)
        if ctx is not None and ctx.cancelled:
            raise RequestCancelledError(f"{request.method} {request.url} cancelled before sending")

        try:
            response = self._client.send(request, follow_redirects=True)
        except httpx.HTTPError as exc:
            LOGGER.error(
                "HTTP request failed",
                extra={"method": request.method, "url": str(request.url), "error": str(exc)},
            )
            raise

        content = response.read()
        envelope = ResponseScheme(
            code=response.status_code,
            endpoint=str(response.request.url),
            method=response.request.method,
            content=content,
            response=response,
        )
        LOGGER.debug(
            "Jira response received",
            extra={"method": envelope.method, "url": envelope.endpoint, "status_code": envelope.code},
        )

        if not 200 <= response.status_code < 300:
            raise InvalidStatusCodeError(envelope)

        if model is None:
            return None, envelope
        try:
            result = _adapter(model).validate_json(content)
        except PydanticValidationError as exc:
            raise DecodeError(f"unable to decode response body: {exc}", envelope) from exc
        return result, envelope

    def encode_payload(self, value: Any) -> io.BytesIO:
        return encode_payload(value)


__all__ = ["CONTEXT_EXTENSION", "JiraHTTPClient", "encode_payload"]
