"""Classic workflow endpoints."""
from __future__ import annotations

from typing import Optional

from ..context import RequestContext
from ..models import (
    ResponseScheme,
    WorkflowCreatedResponseScheme,
    WorkflowPageScheme,
    WorkflowPayloadScheme,
    WorkflowSearchOptions,
)
from ._common import Service, require, with_query


class WorkflowService(Service):
    def gets(
        self,
        ctx: Optional[RequestContext],
        options: WorkflowSearchOptions | None,
        start_at: int,
        max_results: int,
    ) -> tuple[WorkflowPageScheme, ResponseScheme]:
        """``GET /rest/api/{2-3}/workflow/search``"""

        params: dict[str, object] = {"startAt": start_at, "maxResults": max_results}
        if options is not None:
            if options.is_active is not None:
                params["isActive"] = options.is_active
            if options.workflow_name:
                params["workflowName"] = list(options.workflow_name)
            if options.query_string:
                params["queryString"] = options.query_string
            if options.order_by:
                params["orderBy"] = options.order_by
            if options.expand:
                params["expand"] = ",".join(options.expand)
        return self._call(ctx, "GET", with_query(self._path("workflow/search"), params), model=WorkflowPageScheme)

    def create(
        self, ctx: Optional[RequestContext], payload: WorkflowPayloadScheme
    ) -> tuple[WorkflowCreatedResponseScheme, ResponseScheme]:
        return self._call(ctx, "POST", self._path("workflow"), payload, WorkflowCreatedResponseScheme)

    def delete(self, ctx: Optional[RequestContext], workflow_id: str) -> ResponseScheme:
        """Delete an inactive workflow by entity id."""

        require(workflow_id, "no workflow id set")
        _, response = self._call(ctx, "DELETE", self._path(f"workflow/{workflow_id}"))
        return response


__all__ = ["WorkflowService"]
