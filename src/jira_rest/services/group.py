"""Group endpoints."""
from __future__ import annotations

from typing import Optional

from ..context import RequestContext
from ..models import BulkGroupScheme, GroupBulkOptions, GroupMemberPageScheme, GroupScheme, ResponseScheme
from ._common import Service, require, with_query


class GroupService(Service):
    def create(self, ctx: Optional[RequestContext], group_name: str) -> tuple[GroupScheme, ResponseScheme]:
        """Create a group.  ``POST /rest/api/{2-3}/group``"""

        require(group_name, "no group name set")
        return self._call(ctx, "POST", self._path("group"), {"name": group_name}, GroupScheme)

    def delete(self, ctx: Optional[RequestContext], group_name: str) -> ResponseScheme:
        """Remove a group.  ``DELETE /rest/api/{2-3}/group``"""

        require(group_name, "no group name set")
        endpoint = with_query(self._path("group"), {"groupname": group_name})
        _, response = self._call(ctx, "DELETE", endpoint)
        return response

    def bulk(
        self,
        ctx: Optional[RequestContext],
        options: GroupBulkOptions | None,
        start_at: int,
        max_results: int,
    ) -> tuple[BulkGroupScheme, ResponseScheme]:
        """Return a page of groups.  ``GET /rest/api/{2-3}/group/bulk``"""

        params: dict[str, object] = {"startAt": start_at, "maxResults": max_results}
        if options is not None:
            if options.group_ids:
                params["groupId"] = list(options.group_ids)
            if options.group_names:
                params["groupName"] = list(options.group_names)
        return self._call(ctx, "GET", with_query(self._path("group/bulk"), params), model=BulkGroupScheme)

    def members(
        self,
        ctx: Optional[RequestContext],
        group_name: str,
        inactive: bool,
        start_at: int,
        max_results: int,
    ) -> tuple[GroupMemberPageScheme, ResponseScheme]:
        """Return a page of the users in a group.  ``GET /rest/api/{2-3}/group/member``"""

        require(group_name, "no group name set")
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "groupname": group_name,
            "includeInactiveUsers": inactive,
        }
        return self._call(ctx, "GET", with_query(self._path("group/member"), params), model=GroupMemberPageScheme)

    def add(self, ctx: Optional[RequestContext], group_name: str, account_id: str) -> tuple[GroupScheme, ResponseScheme]:
        """Add a user to a group.  ``POST /rest/api/{2-3}/group/user``"""

        require(group_name, "no group name set")
        require(account_id, "no account id set")
        endpoint = with_query(self._path("group/user"), {"groupname": group_name})
        return self._call(ctx, "POST", endpoint, {"accountId": account_id}, GroupScheme)

    def remove(self, ctx: Optional[RequestContext], group_name: str, account_id: str) -> ResponseScheme:
        """Remove a user from a group.  ``DELETE /rest/api/{2-3}/group/user``"""

        require(group_name, "no group name set")
        require(account_id, "no account id set")
        endpoint = with_query(self._path("group/user"), {"groupname": group_name, "accountId": account_id})
        _, response = self._call(ctx, "DELETE", endpoint)
        return response


__all__ = ["GroupService"]
