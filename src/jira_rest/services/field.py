"""Issue field endpoints."""
from __future__ import annotations

from typing import List, Optional

from ..context import RequestContext
from ..models import (
    CustomFieldScheme,
    FieldSearchOptions,
    FieldSearchPageScheme,
    IssueFieldScheme,
    ResponseScheme,
    TaskScheme,
)
from ._common import Service, require, with_query


class FieldService(Service):
    def gets(self, ctx: Optional[RequestContext]) -> tuple[List[IssueFieldScheme], ResponseScheme]:
        """Every system and custom field.  ``GET /rest/api/{2-3}/field``"""

        return self._call(ctx, "GET", self._path("field"), model=List[IssueFieldScheme])

    def create(self, ctx: Optional[RequestContext], payload: CustomFieldScheme) -> tuple[IssueFieldScheme, ResponseScheme]:
        return self._call(ctx, "POST", self._path("field"), payload, IssueFieldScheme)

    def search(
        self,
        ctx: Optional[RequestContext],
        options: FieldSearchOptions | None,
        start_at: int,
        max_results: int,
    ) -> tuple[FieldSearchPageScheme, ResponseScheme]:
        params: dict[str, object] = {"startAt": start_at, "maxResults": max_results}
        if options is not None:
            if options.expand:
                params["expand"] = ",".join(options.expand)
            if options.types:
                params["type"] = ",".join(options.types)
            if options.ids:
                params["id"] = ",".join(options.ids)
            if options.order_by:
                params["orderBy"] = options.order_by
            if options.query:
                params["query"] = options.query
        return self._call(ctx, "GET", with_query(self._path("field/search"), params), model=FieldSearchPageScheme)

    def delete(self, ctx: Optional[RequestContext], field_id: str) -> tuple[TaskScheme, ResponseScheme]:
        """Delete a custom field; Jira answers with the long running task."""

        require(field_id, "no field id set")
        return self._call(ctx, "DELETE", self._path(f"field/{field_id}"), model=TaskScheme)


__all__ = ["FieldService"]
