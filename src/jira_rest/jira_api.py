"""Entry point bundling every Jira service around one transport."""
from __future__ import annotations

import logging

import httpx

from .auth import Authentication
from .config import ClientConfig
from .http_client import JiraHTTPClient
from .services import (
    GroupService,
    IssueService,
    MySelfService,
    PermissionSchemeService,
    ProjectService,
    ScreenService,
    UserService,
    WorkflowService,
)

LOGGER = logging.getLogger(__name__)


class JiraAPI:
    """Typed access to the Jira Cloud REST API (v2 or v3).

    Credentials live on ``api.auth`` (shared with the transport); set them before
    issuing requests from several threads.
    """

    def __init__(self, client: JiraHTTPClient, version: str = "2") -> None:
        self._client = client
        self.version = version
        self.myself = MySelfService(client, version)
        self.group = GroupService(client, version)
        self.screen = ScreenService(client, version)
        self.project = ProjectService(client, version)
        self.user = UserService(client, version)
        self.permission_scheme = PermissionSchemeService(client, version)
        self.workflow = WorkflowService(client, version)
        self.issue = IssueService(client, version)

    @classmethod
    def from_config(cls, config: ClientConfig, *, transport: httpx.BaseTransport | None = None) -> "JiraAPI":
        client = JiraHTTPClient(
            config.site or "",
            ca_bundle=config.ca_bundle,
            timeout=config.timeout,
            transport=transport,
        )
        credentials = config.get_credentials()
        if credentials is not None:
            client.auth.set_basic_auth(*credentials)
        if config.user_agent:
            client.auth.set_user_agent(config.user_agent)
        LOGGER.debug("Configured Jira client", extra={"site": str(client.site), "version": config.api_version})
        return cls(client, config.api_version)

    @property
    def client(self) -> JiraHTTPClient:
        return self._client

    @property
    def auth(self) -> Authentication:
        return self._client.auth

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "JiraAPI":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()


__all__ = ["JiraAPI"]
