"""Response envelope and the JSON shapes exchanged with the Jira REST API."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import httpx
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


@dataclass(slots=True)
class ResponseScheme:
    """Outcome of exactly one HTTP exchange.

    ``code``, ``endpoint`` and ``method`` describe the request that was actually
    sent.  ``content`` holds the whole response body, read once.
    """

    code: int
    endpoint: str
    method: str
    content: bytes = b""
    response: httpx.Response | None = field(default=None, repr=False, compare=False)

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.content)


class JiraModel(BaseModel):
    """Base class mapping snake_case attributes to the API's camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Options objects turned into query strings by the services.


@dataclass(slots=True)
class GroupBulkOptions:
    group_ids: Sequence[str] = field(default_factory=list)
    group_names: Sequence[str] = field(default_factory=list)


@dataclass(slots=True)
class ScreenParams:
    ids: Sequence[int] = field(default_factory=list)
    query_string: str = ""
    scope: Sequence[str] = field(default_factory=list)
    order_by: str = ""


@dataclass(slots=True)
class ProjectSearchOptions:
    order_by: str = ""
    ids: Sequence[int] = field(default_factory=list)
    keys: Sequence[str] = field(default_factory=list)
    query: str = ""
    type_keys: Sequence[str] = field(default_factory=list)
    category_id: int = 0
    action: str = ""
    expand: Sequence[str] = field(default_factory=list)
    status: Sequence[str] = field(default_factory=list)
    properties: Sequence[str] = field(default_factory=list)


@dataclass(slots=True)
class WorkflowSearchOptions:
    workflow_name: Sequence[str] = field(default_factory=list)
    query_string: str = ""
    order_by: str = ""
    expand: Sequence[str] = field(default_factory=list)
    is_active: Optional[bool] = None


@dataclass(slots=True)
class FieldSearchOptions:
    types: Sequence[str] = field(default_factory=list)
    ids: Sequence[str] = field(default_factory=list)
    query: str = ""
    order_by: str = ""
    expand: Sequence[str] = field(default_factory=list)


# Users and groups


class UserScheme(JiraModel):
    self_: Optional[str] = Field(default=None, alias="self")
    account_id: Optional[str] = None
    account_type: Optional[str] = None
    email_address: Optional[str] = None
    display_name: Optional[str] = None
    active: Optional[bool] = None
    time_zone: Optional[str] = None
    locale: Optional[str] = None


class UserPayloadScheme(JiraModel):
    email_address: str
    display_name: Optional[str] = None
    products: List[str] = Field(default_factory=list)
    notification: Optional[bool] = None


class UserGroupScheme(JiraModel):
    self_: Optional[str] = Field(default=None, alias="self")
    name: Optional[str] = None
    group_id: Optional[str] = None


class UserSearchPageScheme(JiraModel):
    max_results: int = 0
    start_at: int = 0
    total: int = 0
    is_last: bool = False
    values: List[UserScheme] = Field(default_factory=list)


class GroupScheme(JiraModel):
    self_: Optional[str] = Field(default=None, alias="self")
    name: Optional[str] = None
    group_id: Optional[str] = None


class BulkGroupScheme(JiraModel):
    max_results: int = 0
    start_at: int = 0
    total: int = 0
    is_last: bool = False
    values: List[GroupScheme] = Field(default_factory=list)


class GroupMemberPageScheme(JiraModel):
    self_: Optional[str] = Field(default=None, alias="self")
    next_page: Optional[str] = None
    max_results: int = 0
    start_at: int = 0
    total: int = 0
    is_last: bool = False
    values: List[UserScheme] = Field(default_factory=list)


# Screens


class ScreenScheme(JiraModel):
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None


class ScreenSearchPageScheme(JiraModel):
    self_: Optional[str] = Field(default=None, alias="self")
    max_results: int = 0
    start_at: int = 0
    total: int = 0
    is_last: bool = False
    values: List[ScreenScheme] = Field(default_factory=list)


class ScreenTabScheme(JiraModel):
    id: Optional[int] = None
    name: Optional[str] = None


class ScreenWithTabScheme(ScreenScheme):
    tab: Optional[ScreenTabScheme] = None


class ScreenFieldPageScheme(JiraModel):
    max_results: int = 0
    start_at: int = 0
    total: int = 0
    is_last: bool = False
    values: List[ScreenWithTabScheme] = Field(default_factory=list)


class AvailableScreenFieldScheme(JiraModel):
    id: Optional[str] = None
    name: Optional[str] = None


# Projects


class ProjectCategoryScheme(JiraModel):
    self_: Optional[str] = Field(default=None, alias="self")
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


class ProjectScheme(JiraModel):
    self_: Optional[str] = Field(default=None, alias="self")
    id: Optional[str] = None
    key: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    project_type_key: Optional[str] = None
    simplified: Optional[bool] = None
    style: Optional[str] = None
    is_private: Optional[bool] = None
    archived: Optional[bool] = None
    lead: Optional[UserScheme] = None
    project_category: Optional[ProjectCategoryScheme] = None


class ProjectPayloadScheme(JiraModel):
    key: str
    name: str
    project_type_key: str
    lead_account_id: str
    description: Optional[str] = None
    project_template_key: Optional[str] = None
    url: Optional[str] = None
    assignee_type: Optional[str] = None
    avatar_id: Optional[int] = None
    category_id: Optional[int] = None
    permission_scheme: Optional[int] = None
    notification_scheme: Optional[int] = None
    workflow_scheme: Optional[int] = None


class ProjectUpdateScheme(JiraModel):
    key: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    lead_account_id: Optional[str] = None
    url: Optional[str] = None
    assignee_type: Optional[str] = None
    avatar_id: Optional[int] = None
    category_id: Optional[int] = None


class NewProjectCreatedScheme(JiraModel):
    self_: Optional[str] = Field(default=None, alias="self")
    id: Optional[int] = None
    key: Optional[str] = None


class ProjectSearchScheme(JiraModel):
    self_: Optional[str] = Field(default=None, alias="self")
    next_page: Optional[str] = None
    max_results: int = 0
    start_at: int = 0
    total: int = 0
    is_last: bool = False
    values: List[ProjectScheme] = Field(default_factory=list)


class StatusCategoryScheme(JiraModel):
    id: Optional[int] = None
    key: Optional[str] = None
    name: Optional[str] = None


class StatusScheme(JiraModel):
    self_: Optional[str] = Field(default=None, alias="self")
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    untranslated_name: Optional[str] = None
    status_category: Optional[StatusCategoryScheme] = None


class ProjectStatusPageScheme(JiraModel):
    self_: Optional[str] = Field(default=None, alias="self")
    id: Optional[str] = None
    name: Optional[str] = None
    subtask: Optional[bool] = None
    statuses: List[StatusScheme] = Field(default_factory=list)


class TaskScheme(JiraModel):
    self_: Optional[str] = Field(default=None, alias="self")
    id: Optional[str] = None


# Permission schemes


class PermissionGrantHolderScheme(JiraModel):
    type: Optional[str] = None
    parameter: Optional[str] = None
    expand: Optional[str] = None


class PermissionGrantScheme(JiraModel):
    id: Optional[int] = None
    self_: Optional[str] = Field(default=None, alias="self")
    holder: Optional[PermissionGrantHolderScheme] = None
    permission: Optional[str] = None


class PermissionSchemeScheme(JiraModel):
    expand: Optional[str] = None
    id: Optional[int] = None
    self_: Optional[str] = Field(default=None, alias="self")
    name: Optional[str] = None
    description: Optional[str] = None
    permissions: Optional[List[PermissionGrantScheme]] = None


class PermissionSchemePageScheme(JiraModel):
    permission_schemes: List[PermissionSchemeScheme] = Field(default_factory=list)


# Workflows


class WorkflowPublishedIDScheme(JiraModel):
    name: Optional[str] = None
    entity_id: Optional[str] = None


class WorkflowScheme(JiraModel):
    id: Optional[WorkflowPublishedIDScheme] = None
    description: Optional[str] = None
    created: Optional[str] = None
    updated: Optional[str] = None
    is_default: Optional[bool] = None
    statuses: List[StatusScheme] = Field(default_factory=list)


class WorkflowPageScheme(JiraModel):
    self_: Optional[str] = Field(default=None, alias="self")
    next_page: Optional[str] = None
    max_results: int = 0
    start_at: int = 0
    total: int = 0
    is_last: bool = False
    values: List[WorkflowScheme] = Field(default_factory=list)


class WorkflowStatusPayloadScheme(JiraModel):
    id: str
    properties: Optional[Dict[str, str]] = None


class WorkflowTransitionPayloadScheme(JiraModel):
    name: str
    to: str
    type: str
    description: Optional[str] = None
    from_: Optional[List[str]] = Field(default=None, alias="from")


class WorkflowPayloadScheme(JiraModel):
    name: str
    description: Optional[str] = None
    statuses: List[WorkflowStatusPayloadScheme] = Field(default_factory=list)
    transitions: List[WorkflowTransitionPayloadScheme] = Field(default_factory=list)


class WorkflowCreatedResponseScheme(JiraModel):
    name: Optional[str] = None
    entity_id: Optional[str] = None


# Issue fields


class FieldSchemaScheme(JiraModel):
    type: Optional[str] = None
    items: Optional[str] = None
    system: Optional[str] = None
    custom: Optional[str] = None
    custom_id: Optional[int] = None


class IssueFieldScheme(JiraModel):
    id: Optional[str] = None
    key: Optional[str] = None
    name: Optional[str] = None
    custom: Optional[bool] = None
    orderable: Optional[bool] = None
    navigable: Optional[bool] = None
    searchable: Optional[bool] = None
    clause_names: List[str] = Field(default_factory=list)
    schema_: Optional[FieldSchemaScheme] = Field(default=None, alias="schema")


class CustomFieldScheme(JiraModel):
    name: str
    field_type: str = Field(alias="type")
    searcher_key: str
    description: Optional[str] = None


class FieldSearchPageScheme(JiraModel):
    max_results: int = 0
    start_at: int = 0
    total: int = 0
    is_last: bool = False
    values: List[IssueFieldScheme] = Field(default_factory=list)


# Issues


class IssueTypeScheme(JiraModel):
    self_: Optional[str] = Field(default=None, alias="self")
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    subtask: Optional[bool] = None


class PriorityScheme(JiraModel):
    id: Optional[str] = None
    name: Optional[str] = None


class IssueProjectScheme(JiraModel):
    id: Optional[str] = None
    key: Optional[str] = None
    name: Optional[str] = None


class IssueFieldsScheme(JiraModel):
    """Standard issue fields; custom fields are kept as extra attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    summary: Optional[str] = None
    description: Optional[str] = None
    project: Optional[IssueProjectScheme] = None
    issue_type: Optional[IssueTypeScheme] = Field(default=None, alias="issuetype")
    labels: Optional[List[str]] = None
    assignee: Optional[UserScheme] = None
    reporter: Optional[UserScheme] = None
    priority: Optional[PriorityScheme] = None
    status: Optional[StatusScheme] = None
    created: Optional[str] = None
    updated: Optional[str] = None


class IssueScheme(JiraModel):
    id: Optional[str] = None
    key: Optional[str] = None
    self_: Optional[str] = Field(default=None, alias="self")
    fields: Optional[IssueFieldsScheme] = None


class IssueResponseScheme(JiraModel):
    id: Optional[str] = None
    key: Optional[str] = None
    self_: Optional[str] = Field(default=None, alias="self")


class IssueTransitionScheme(JiraModel):
    id: Optional[str] = None
    name: Optional[str] = None
    to: Optional[StatusScheme] = None
    has_screen: Optional[bool] = None


class IssueTransitionsScheme(JiraModel):
    expand: Optional[str] = None
    transitions: List[IssueTransitionScheme] = Field(default_factory=list)


class IssueSearchScheme(JiraModel):
    expand: Optional[str] = None
    start_at: int = 0
    max_results: int = 0
    total: int = 0
    issues: List[IssueScheme] = Field(default_factory=list)
    warning_messages: List[str] = Field(default_factory=list)


# Attachments


class AttachmentSettingScheme(JiraModel):
    enabled: Optional[bool] = None
    upload_limit: Optional[int] = None


class IssueAttachmentScheme(JiraModel):
    self_: Optional[str] = Field(default=None, alias="self")
    id: Optional[str] = None
    filename: Optional[str] = None
    author: Optional[UserScheme] = None
    created: Optional[str] = None
    size: Optional[int] = None
    mime_type: Optional[str] = None
    content: Optional[str] = None
    thumbnail: Optional[str] = None


class IssueAttachmentMetadataScheme(IssueAttachmentScheme):
    properties: Optional[Dict[str, Any]] = None


__all__ = [
    "AttachmentSettingScheme",
    "AvailableScreenFieldScheme",
    "BulkGroupScheme",
    "CustomFieldScheme",
    "FieldSchemaScheme",
    "FieldSearchOptions",
    "FieldSearchPageScheme",
    "GroupBulkOptions",
    "GroupMemberPageScheme",
    "GroupScheme",
    "IssueAttachmentMetadataScheme",
    "IssueAttachmentScheme",
    "IssueFieldScheme",
    "IssueFieldsScheme",
    "IssueProjectScheme",
    "IssueResponseScheme",
    "IssueScheme",
    "IssueSearchScheme",
    "IssueTransitionScheme",
    "IssueTransitionsScheme",
    "IssueTypeScheme",
    "JiraModel",
    "NewProjectCreatedScheme",
    "PermissionGrantHolderScheme",
    "PermissionGrantScheme",
    "PermissionSchemePageScheme",
    "PermissionSchemeScheme",
    "PriorityScheme",
    "ProjectCategoryScheme",
    "ProjectPayloadScheme",
    "ProjectScheme",
    "ProjectSearchOptions",
    "ProjectSearchScheme",
    "ProjectStatusPageScheme",
    "ProjectUpdateScheme",
    "ResponseScheme",
    "ScreenFieldPageScheme",
    "ScreenParams",
    "ScreenScheme",
    "ScreenSearchPageScheme",
    "ScreenTabScheme",
    "ScreenWithTabScheme",
    "StatusCategoryScheme",
    "StatusScheme",
    "TaskScheme",
    "UserGroupScheme",
    "UserPayloadScheme",
    "UserScheme",
    "UserSearchPageScheme",
    "WorkflowCreatedResponseScheme",
    "WorkflowPageScheme",
    "WorkflowPayloadScheme",
    "WorkflowPublishedIDScheme",
    "WorkflowScheme",
    "WorkflowSearchOptions",
    "WorkflowStatusPayloadScheme",
    "WorkflowTransitionPayloadScheme",
]
