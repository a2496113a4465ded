from __future__ import annotations

from typing import Callable

import httpx
import pytest

from jira_rest.context import RequestContext
from jira_rest.http_client import JiraHTTPClient
from jira_rest.jira_api import JiraAPI

SITE = "https://org.atlassian.net"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def ctx() -> RequestContext:
    return RequestContext()


@pytest.fixture
def make_client() -> Callable[[Handler], JiraHTTPClient]:
    def factory(handler: Handler) -> JiraHTTPClient:
        return JiraHTTPClient(SITE, transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def make_api(make_client: Callable[[Handler], JiraHTTPClient]) -> Callable[[Handler], JiraAPI]:
    def factory(handler: Handler) -> JiraAPI:
        return JiraAPI(make_client(handler), "2")

    return factory
