"""Issue attachment endpoints."""
from __future__ import annotations

from typing import IO, List, Optional

import httpx

from ..context import RequestContext
from ..errors import MissingParameterError
from ..models import AttachmentSettingScheme, IssueAttachmentMetadataScheme, IssueAttachmentScheme, ResponseScheme
from ._common import Service, require


class AttachmentService(Service):
    def settings(self, ctx: Optional[RequestContext]) -> tuple[AttachmentSettingScheme, ResponseScheme]:
        return self._call(ctx, "GET", self._path("attachment/meta"), model=AttachmentSettingScheme)

    def metadata(
        self, ctx: Optional[RequestContext], attachment_id: str
    ) -> tuple[IssueAttachmentMetadataScheme, ResponseScheme]:
        require(attachment_id, "no attachment id set")
        return self._call(ctx, "GET", self._path(f"attachment/{attachment_id}"), model=IssueAttachmentMetadataScheme)

    def delete(self, ctx: Optional[RequestContext], attachment_id: str) -> ResponseScheme:
        require(attachment_id, "no attachment id set")
        _, response = self._call(ctx, "DELETE", self._path(f"attachment/{attachment_id}"))
        return response

    def add(
        self,
        ctx: Optional[RequestContext],
        issue_key_or_id: str,
        file_name: str,
        file: IO[bytes] | bytes | None,
    ) -> tuple[List[IssueAttachmentScheme], ResponseScheme]:
        """Upload one file to an issue as ``multipart/form-data``."""

        require(issue_key_or_id, "no issue key/id set")
        require(file_name, "no attachment filename set")
        if file is None:
            raise MissingParameterError("no reader set")

        endpoint = self._path(f"issue/{issue_key_or_id}/attachments")
        # httpx encodes the form; the request keeps its boundary content type.
        form = httpx.Request("POST", str(self._client.site), files={"file": (file_name, file)})
        body = form.read()
        request = self._client.new_request(ctx, "POST", endpoint, form.headers["Content-Type"], body)
        return self._client.call(request, List[IssueAttachmentScheme])


__all__ = ["AttachmentService"]
