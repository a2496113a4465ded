"""Endpoints describing the authenticated user."""
from __future__ import annotations

from typing import Optional, Sequence

from ..context import RequestContext
from ..models import ResponseScheme, UserScheme
from ._common import Service, with_query


class MySelfService(Service):
    def details(
        self, ctx: Optional[RequestContext], expand: Sequence[str] | None = None
    ) -> tuple[UserScheme, ResponseScheme]:
        """Return the user the client authenticates as.  ``GET /rest/api/{2-3}/myself``"""

        params = {"expand": ",".join(expand)} if expand else None
        return self._call(ctx, "GET", with_query(self._path("myself"), params), model=UserScheme)


__all__ = ["MySelfService"]
