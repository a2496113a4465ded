from __future__ import annotations

import json

import httpx
import pytest

from jira_rest.errors import MissingContextError, MissingParameterError
from jira_rest.models import ScreenParams


def test_create_screen(make_api, ctx) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path == "/rest/api/2/screens"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"name": "A", "description": "B"}
        return httpx.Response(201, json={"id": 10005, "name": "A", "description": "B"})

    api = make_api(handler)
    screen, response = api.screen.create(ctx, "A", "B")
    assert (screen.id, screen.name, screen.description) == (10005, "A", "B")
    assert response.code == 201


def test_create_screen_without_description(make_api, ctx) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert json.loads(request.content) == {"name": "A"}
        return httpx.Response(201, json={"id": 1, "name": "A"})

    api = make_api(handler)
    screen, _ = api.screen.create(ctx, "A")
    assert screen.description is None


def test_create_screen_requires_context(make_api) -> None:
    api = make_api(lambda _: httpx.Response(201, json={}))
    with pytest.raises(MissingContextError):
        api.screen.create(None, "A", "B")


def test_gets_with_options(make_api, ctx) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/rest/api/2/screens"
        assert request.url.params.get_list("id") == ["1", "2"]
        assert request.url.params.get_list("scope") == ["PROJECT", "GLOBAL"]
        assert request.url.params["queryString"] == "Default"
        assert request.url.params["orderBy"] == "name"
        return httpx.Response(200, json={"total": 2, "values": [{"id": 1, "name": "Default Screen"}, {"id": 2}]})

    api = make_api(handler)
    options = ScreenParams(ids=[1, 2], query_string="Default", scope=["PROJECT", "GLOBAL"], order_by="name")
    page, _ = api.screen.gets(ctx, options, 0, 50)
    assert page.total == 2
    assert page.values[0].name == "Default Screen"


def test_fields_and_available(make_api, ctx) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/rest/api/2/field/customfield_10000/screens":
            return httpx.Response(200, json={"values": [{"id": 1, "name": "S", "tab": {"id": 3, "name": "Field Tab"}}]})
        if request.url.path == "/rest/api/2/screens/1/availableFields":
            return httpx.Response(200, json=[{"id": "summary", "name": "Summary"}])
        raise AssertionError(f"Unexpected URL {request.url}")

    api = make_api(handler)
    page, _ = api.screen.fields(ctx, "customfield_10000", 0, 50)
    fields, _ = api.screen.available(ctx, 1)
    assert page.values[0].tab.name == "Field Tab"
    assert [field.id for field in fields] == ["summary"]


def test_update_add_to_default_and_delete(make_api, ctx) -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path))
        if request.method == "PUT":
            assert json.loads(request.content) == {"name": "New"}
            return httpx.Response(200, json={"id": 7, "name": "New"})
        return httpx.Response(204)

    api = make_api(handler)
    screen, _ = api.screen.update(ctx, 7, "New")
    api.screen.add_to_default(ctx, "customfield_1")
    api.screen.delete(ctx, 7)
    assert screen.name == "New"
    assert seen == [
        ("PUT", "/rest/api/2/screens/7"),
        ("POST", "/rest/api/2/screens/addToDefault/customfield_1"),
        ("DELETE", "/rest/api/2/screens/7"),
    ]


@pytest.mark.parametrize(
    ("call", "message"),
    [
        (lambda api, ctx: api.screen.create(ctx, ""), "no screen name set"),
        (lambda api, ctx: api.screen.delete(ctx, 0), "no screen id set"),
        (lambda api, ctx: api.screen.available(ctx, 0), "no screen id set"),
        (lambda api, ctx: api.screen.fields(ctx, "", 0, 50), "no field id set"),
    ],
)
def test_missing_parameters(make_api, ctx, call, message: str) -> None:
    api = make_api(lambda _: httpx.Response(200))
    with pytest.raises(MissingParameterError, match=message):
        call(api, ctx)
