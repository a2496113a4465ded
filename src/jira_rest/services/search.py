"""JQL issue search endpoints."""
from __future__ import annotations

from typing import Optional, Sequence

from ..context import RequestContext
from ..models import IssueSearchScheme, ResponseScheme
from ._common import Service, require, with_query


class SearchService(Service):
    def get(
        self,
        ctx: Optional[RequestContext],
        jql: str,
        fields: Sequence[str] | None = None,
        expand: Sequence[str] | None = None,
        start_at: int = 0,
        max_results: int = 50,
        validate: str = "",
    ) -> tuple[IssueSearchScheme, ResponseScheme]:
        """Search issues with the JQL in the query string.  ``GET /rest/api/{2-3}/search``"""

        require(jql, "no jql set")
        params: dict[str, object] = {"jql": jql, "startAt": start_at, "maxResults": max_results}
        if fields:
            params["fields"] = ",".join(fields)
        if expand:
            params["expand"] = ",".join(expand)
        if validate:
            params["validateQuery"] = validate
        return self._call(ctx, "GET", with_query(self._path("search"), params), model=IssueSearchScheme)

    def post(
        self,
        ctx: Optional[RequestContext],
        jql: str,
        fields: Sequence[str] | None = None,
        expand: Sequence[str] | None = None,
        start_at: int = 0,
        max_results: int = 50,
        validate: str = "",
    ) -> tuple[IssueSearchScheme, ResponseScheme]:
        """Search issues with the JQL in the body, for queries too long for a URL."""

        require(jql, "no jql set")
        payload: dict[str, object] = {"jql": jql, "startAt": start_at, "maxResults": max_results}
        if fields:
            payload["fields"] = list(fields)
        if expand:
            payload["expand"] = list(expand)
        if validate:
            payload["validateQuery"] = validate
        return self._call(ctx, "POST", self._path("search"), payload, IssueSearchScheme)


__all__ = ["SearchService"]
