"""Permission scheme endpoints."""
from __future__ import annotations

from typing import Optional, Sequence

from ..context import RequestContext
from ..models import PermissionSchemePageScheme, PermissionSchemeScheme, ResponseScheme
from ._common import Service, require, with_query

_NO_ID = "no permission scheme id set"


class PermissionSchemeService(Service):
    def gets(self, ctx: Optional[RequestContext]) -> tuple[PermissionSchemePageScheme, ResponseScheme]:
        return self._call(ctx, "GET", self._path("permissionscheme"), model=PermissionSchemePageScheme)

    def get(
        self, ctx: Optional[RequestContext], permission_scheme_id: int, expand: Sequence[str] | None = None
    ) -> tuple[PermissionSchemeScheme, ResponseScheme]:
        require(permission_scheme_id, _NO_ID)
        params = {"expand": ",".join(expand)} if expand else None
        endpoint = with_query(self._path(f"permissionscheme/{permission_scheme_id}"), params)
        return self._call(ctx, "GET", endpoint, model=PermissionSchemeScheme)

    def create(
        self, ctx: Optional[RequestContext], payload: PermissionSchemeScheme
    ) -> tuple[PermissionSchemeScheme, ResponseScheme]:
        return self._call(ctx, "POST", self._path("permissionscheme"), payload, PermissionSchemeScheme)

    def update(
        self, ctx: Optional[RequestContext], permission_scheme_id: int, payload: PermissionSchemeScheme
    ) -> tuple[PermissionSchemeScheme, ResponseScheme]:
        """Replace a scheme; grants omitted from ``payload.permissions`` are removed."""

        require(permission_scheme_id, _NO_ID)
        endpoint = self._path(f"permissionscheme/{permission_scheme_id}")
        return self._call(ctx, "PUT", endpoint, payload, PermissionSchemeScheme)

    def delete(self, ctx: Optional[RequestContext], permission_scheme_id: int) -> ResponseScheme:
        require(permission_scheme_id, _NO_ID)
        _, response = self._call(ctx, "DELETE", self._path(f"permissionscheme/{permission_scheme_id}"))
        return response


__all__ = ["PermissionSchemeService"]
