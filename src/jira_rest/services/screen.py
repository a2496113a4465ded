"""Screen endpoints."""
from __future__ import annotations

from typing import List, Optional

from ..context import RequestContext
from ..models import (
    AvailableScreenFieldScheme,
    ResponseScheme,
    ScreenFieldPageScheme,
    ScreenParams,
    ScreenScheme,
    ScreenSearchPageScheme,
)
from ._common import Service, require, with_query


class ScreenService(Service):
    def fields(
        self, ctx: Optional[RequestContext], field_id: str, start_at: int, max_results: int
    ) -> tuple[ScreenFieldPageScheme, ResponseScheme]:
        """Screens (and tabs) a field is used on.  ``GET /rest/api/{2-3}/field/{fieldId}/screens``"""

        require(field_id, "no field id set")
        params = {"startAt": start_at, "maxResults": max_results}
        endpoint = with_query(self._path(f"field/{field_id}/screens"), params)
        return self._call(ctx, "GET", endpoint, model=ScreenFieldPageScheme)

    def gets(
        self, ctx: Optional[RequestContext], options: ScreenParams | None, start_at: int, max_results: int
    ) -> tuple[ScreenSearchPageScheme, ResponseScheme]:
        """``GET /rest/api/{2-3}/screens``"""

        params: dict[str, object] = {"startAt": start_at, "maxResults": max_results}
        if options is not None:
            if options.ids:
                params["id"] = list(options.ids)
            if options.query_string:
                params["queryString"] = options.query_string
            if options.scope:
                params["scope"] = list(options.scope)
            if options.order_by:
                params["orderBy"] = options.order_by
        return self._call(ctx, "GET", with_query(self._path("screens"), params), model=ScreenSearchPageScheme)

    def create(
        self, ctx: Optional[RequestContext], name: str, description: str = ""
    ) -> tuple[ScreenScheme, ResponseScheme]:
        """``POST /rest/api/{2-3}/screens``"""

        require(name, "no screen name set")
        payload = {"name": name}
        if description:
            payload["description"] = description
        return self._call(ctx, "POST", self._path("screens"), payload, ScreenScheme)

    def add_to_default(self, ctx: Optional[RequestContext], field_id: str) -> ResponseScheme:
        """Add a field to the default tab of the default screen."""

        require(field_id, "no field id set")
        _, response = self._call(ctx, "POST", self._path(f"screens/addToDefault/{field_id}"))
        return response

    def update(
        self, ctx: Optional[RequestContext], screen_id: int, name: str = "", description: str = ""
    ) -> tuple[ScreenScheme, ResponseScheme]:
        require(screen_id, "no screen id set")
        payload = {}
        if name:
            payload["name"] = name
        if description:
            payload["description"] = description
        return self._call(ctx, "PUT", self._path(f"screens/{screen_id}"), payload, ScreenScheme)

    def delete(self, ctx: Optional[RequestContext], screen_id: int) -> ResponseScheme:
        require(screen_id, "no screen id set")
        _, response = self._call(ctx, "DELETE", self._path(f"screens/{screen_id}"))
        return response

    def available(
        self, ctx: Optional[RequestContext], screen_id: int
    ) -> tuple[List[AvailableScreenFieldScheme], ResponseScheme]:
        """Fields that can be added to a screen's tabs."""

        require(screen_id, "no screen id set")
        endpoint = self._path(f"screens/{screen_id}/availableFields")
        return self._call(ctx, "GET", endpoint, model=List[AvailableScreenFieldScheme])


__all__ = ["ScreenService"]
