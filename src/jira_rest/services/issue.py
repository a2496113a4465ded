"""Issue endpoints (rich text flavour)."""
from __future__ import annotations

import json
from typing import Any, Mapping, Optional, Sequence

from ..context import RequestContext
from ..http_client import JiraHTTPClient
from ..models import IssueResponseScheme, IssueScheme, IssueTransitionsScheme, ResponseScheme
from ._common import Service, require, with_query
from .attachment import AttachmentService
from .field import FieldService
from .search import SearchService

_NO_KEY = "no issue key/id set"


def _merge_fields(payload: IssueScheme, custom_fields: Mapping[str, Any] | None) -> dict[str, Any]:
    body = json.loads(payload.model_dump_json(by_alias=True, exclude_none=True))
    if custom_fields:
        body.setdefault("fields", {}).update(custom_fields)
    return body


class IssueService(Service):
    """Issue operations plus the ``field``, ``attachment`` and ``search`` sub-services."""

    def __init__(self, client: JiraHTTPClient, version: str) -> None:
        super().__init__(client, version)
        self.field = FieldService(client, version)
        self.attachment = AttachmentService(client, version)
        self.search = SearchService(client, version)

    def create(
        self,
        ctx: Optional[RequestContext],
        payload: IssueScheme,
        custom_fields: Mapping[str, Any] | None = None,
    ) -> tuple[IssueResponseScheme, ResponseScheme]:
        """Create an issue; ``custom_fields`` are merged into ``fields``."""

        body = _merge_fields(payload, custom_fields)
        return self._call(ctx, "POST", self._path("issue"), body, IssueResponseScheme)

    def get(
        self,
        ctx: Optional[RequestContext],
        issue_key_or_id: str,
        fields: Sequence[str] | None = None,
        expand: Sequence[str] | None = None,
    ) -> tuple[IssueScheme, ResponseScheme]:
        require(issue_key_or_id, _NO_KEY)
        params: dict[str, object] = {}
        if fields:
            params["fields"] = ",".join(fields)
        if expand:
            params["expand"] = ",".join(expand)
        endpoint = with_query(self._path(f"issue/{issue_key_or_id}"), params)
        return self._call(ctx, "GET", endpoint, model=IssueScheme)

    def update(
        self,
        ctx: Optional[RequestContext],
        issue_key_or_id: str,
        notify: bool,
        payload: IssueScheme,
        custom_fields: Mapping[str, Any] | None = None,
    ) -> ResponseScheme:
        require(issue_key_or_id, _NO_KEY)
        endpoint = with_query(self._path(f"issue/{issue_key_or_id}"), {"notifyUsers": notify})
        _, response = self._call(ctx, "PUT", endpoint, _merge_fields(payload, custom_fields))
        return response

    def delete(self, ctx: Optional[RequestContext], issue_key_or_id: str, delete_subtasks: bool = False) -> ResponseScheme:
        require(issue_key_or_id, _NO_KEY)
        endpoint = with_query(self._path(f"issue/{issue_key_or_id}"), {"deleteSubtasks": delete_subtasks})
        _, response = self._call(ctx, "DELETE", endpoint)
        return response

    def assign(self, ctx: Optional[RequestContext], issue_key_or_id: str, account_id: str) -> ResponseScheme:
        require(issue_key_or_id, _NO_KEY)
        require(account_id, "no account id set")
        endpoint = self._path(f"issue/{issue_key_or_id}/assignee")
        _, response = self._call(ctx, "PUT", endpoint, {"accountId": account_id})
        return response

    def transitions(
        self, ctx: Optional[RequestContext], issue_key_or_id: str
    ) -> tuple[IssueTransitionsScheme, ResponseScheme]:
        require(issue_key_or_id, _NO_KEY)
        endpoint = self._path(f"issue/{issue_key_or_id}/transitions")
        return self._call(ctx, "GET", endpoint, model=IssueTransitionsScheme)

    def move(
        self,
        ctx: Optional[RequestContext],
        issue_key_or_id: str,
        transition_id: str,
        fields: Mapping[str, Any] | None = None,
    ) -> ResponseScheme:
        """Perform a workflow transition, optionally setting fields on the way."""

        require(issue_key_or_id, _NO_KEY)
        require(transition_id, "no transition id set")
        payload: dict[str, Any] = {"transition": {"id": transition_id}}
        if fields:
            payload["fields"] = dict(fields)
        _, response = self._call(ctx, "POST", self._path(f"issue/{issue_key_or_id}/transitions"), payload)
        return response


__all__ = ["IssueService"]
