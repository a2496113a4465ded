"""Project endpoints."""
from __future__ import annotations

from typing import List, Optional, Sequence

from ..context import RequestContext
from ..models import (
    NewProjectCreatedScheme,
    ProjectPayloadScheme,
    ProjectScheme,
    ProjectSearchOptions,
    ProjectSearchScheme,
    ProjectStatusPageScheme,
    ProjectUpdateScheme,
    ResponseScheme,
)
from ._common import Service, require, with_query

_NO_KEY = "no project id or key set"


class ProjectService(Service):
    def create(
        self, ctx: Optional[RequestContext], payload: ProjectPayloadScheme
    ) -> tuple[NewProjectCreatedScheme, ResponseScheme]:
        return self._call(ctx, "POST", self._path("project"), payload, NewProjectCreatedScheme)

    def search(
        self,
        ctx: Optional[RequestContext],
        options: ProjectSearchOptions | None,
        start_at: int,
        max_results: int,
    ) -> tuple[ProjectSearchScheme, ResponseScheme]:
        """Return a page of visible projects.  ``GET /rest/api/{2-3}/project/search``"""

        params: dict[str, object] = {"startAt": start_at, "maxResults": max_results}
        if options is not None:
            if options.expand:
                params["expand"] = ",".join(options.expand)
            if options.ids:
                params["id"] = list(options.ids)
            if options.keys:
                params["keys"] = list(options.keys)
            if options.order_by:
                params["orderBy"] = options.order_by
            if options.query:
                params["query"] = options.query
            if options.type_keys:
                params["typeKey"] = ",".join(options.type_keys)
            if options.category_id:
                params["categoryId"] = options.category_id
            if options.action:
                params["action"] = options.action
            if options.status:
                params["status"] = ",".join(options.status)
            if options.properties:
                params["properties"] = ",".join(options.properties)
        return self._call(ctx, "GET", with_query(self._path("project/search"), params), model=ProjectSearchScheme)

    def get(
        self, ctx: Optional[RequestContext], project_key_or_id: str, expand: Sequence[str] | None = None
    ) -> tuple[ProjectScheme, ResponseScheme]:
        require(project_key_or_id, _NO_KEY)
        params = {"expand": ",".join(expand)} if expand else None
        endpoint = with_query(self._path(f"project/{project_key_or_id}"), params)
        return self._call(ctx, "GET", endpoint, model=ProjectScheme)

    def update(
        self, ctx: Optional[RequestContext], project_key_or_id: str, payload: ProjectUpdateScheme
    ) -> tuple[ProjectScheme, ResponseScheme]:
        require(project_key_or_id, _NO_KEY)
        return self._call(ctx, "PUT", self._path(f"project/{project_key_or_id}"), payload, ProjectScheme)

    def delete(self, ctx: Optional[RequestContext], project_key_or_id: str, enable_undo: bool) -> ResponseScheme:
        """Delete a project; with ``enable_undo`` it goes to the recycle bin."""

        require(project_key_or_id, _NO_KEY)
        endpoint = with_query(self._path(f"project/{project_key_or_id}"), {"enableUndo": enable_undo})
        _, response = self._call(ctx, "DELETE", endpoint)
        return response

    def archive(self, ctx: Optional[RequestContext], project_key_or_id: str) -> ResponseScheme:
        require(project_key_or_id, _NO_KEY)
        _, response = self._call(ctx, "POST", self._path(f"project/{project_key_or_id}/archive"))
        return response

    def restore(self, ctx: Optional[RequestContext], project_key_or_id: str) -> tuple[ProjectScheme, ResponseScheme]:
        require(project_key_or_id, _NO_KEY)
        return self._call(ctx, "POST", self._path(f"project/{project_key_or_id}/restore"), model=ProjectScheme)

    def statuses(
        self, ctx: Optional[RequestContext], project_key_or_id: str
    ) -> tuple[List[ProjectStatusPageScheme], ResponseScheme]:
        """Valid statuses for each issue type of a project."""

        require(project_key_or_id, _NO_KEY)
        endpoint = self._path(f"project/{project_key_or_id}/statuses")
        return self._call(ctx, "GET", endpoint, model=List[ProjectStatusPageScheme])


__all__ = ["ProjectService"]
