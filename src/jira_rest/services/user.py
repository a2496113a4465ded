"""User endpoints."""
from __future__ import annotations

from typing import List, Optional, Sequence

from ..context import RequestContext
from ..models import ResponseScheme, UserGroupScheme, UserPayloadScheme, UserScheme, UserSearchPageScheme
from ._common import Service, require, with_query


class UserService(Service):
    def get(
        self, ctx: Optional[RequestContext], account_id: str, expand: Sequence[str] | None = None
    ) -> tuple[UserScheme, ResponseScheme]:
        require(account_id, "no account id set")
        params: dict[str, object] = {"accountId": account_id}
        if expand:
            params["expand"] = ",".join(expand)
        return self._call(ctx, "GET", with_query(self._path("user"), params), model=UserScheme)

    def create(self, ctx: Optional[RequestContext], payload: UserPayloadScheme) -> tuple[UserScheme, ResponseScheme]:
        return self._call(ctx, "POST", self._path("user"), payload, UserScheme)

    def delete(self, ctx: Optional[RequestContext], account_id: str) -> ResponseScheme:
        require(account_id, "no account id set")
        _, response = self._call(ctx, "DELETE", with_query(self._path("user"), {"accountId": account_id}))
        return response

    def find(
        self, ctx: Optional[RequestContext], account_ids: Sequence[str], start_at: int, max_results: int
    ) -> tuple[UserSearchPageScheme, ResponseScheme]:
        """Bulk lookup by account id.  ``GET /rest/api/{2-3}/user/bulk``"""

        require(account_ids, "no account id's set")
        params = {"startAt": start_at, "maxResults": max_results, "accountId": list(account_ids)}
        return self._call(ctx, "GET", with_query(self._path("user/bulk"), params), model=UserSearchPageScheme)

    def groups(self, ctx: Optional[RequestContext], account_id: str) -> tuple[List[UserGroupScheme], ResponseScheme]:
        require(account_id, "no account id set")
        endpoint = with_query(self._path("user/groups"), {"accountId": account_id})
        return self._call(ctx, "GET", endpoint, model=List[UserGroupScheme])

    def gets(self, ctx: Optional[RequestContext], start_at: int, max_results: int) -> tuple[List[UserScheme], ResponseScheme]:
        params = {"startAt": start_at, "maxResults": max_results}
        return self._call(ctx, "GET", with_query(self._path("users/search"), params), model=List[UserScheme])


__all__ = ["UserService"]
