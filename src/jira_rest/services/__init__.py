"""Resource services built on :class:`jira_rest.http_client.JiraHTTPClient`."""
from __future__ import annotations

from ._common import Service, encode_params
from .attachment import AttachmentService
from .field import FieldService
from .group import GroupService
from .issue import IssueService
from .myself import MySelfService
from .permission_scheme import PermissionSchemeService
from .project import ProjectService
from .screen import ScreenService
from .search import SearchService
from .user import UserService
from .workflow import WorkflowService

__all__ = [
    "AttachmentService",
    "FieldService",
    "GroupService",
    "IssueService",
    "MySelfService",
    "PermissionSchemeService",
    "ProjectService",
    "ScreenService",
    "SearchService",
    "Service",
    "UserService",
    "WorkflowService",
    "encode_params",
]
