from __future__ import annotations

import io
import json

import httpx
import pytest

from jira_rest.errors import MissingParameterError
from jira_rest.models import (
    CustomFieldScheme,
    FieldSearchOptions,
    IssueFieldsScheme,
    IssueProjectScheme,
    IssueScheme,
    IssueTypeScheme,
)


def test_create_issue_merges_custom_fields(make_api, ctx) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path == "/rest/api/2/issue"
        assert json.loads(request.content) == {
            "fields": {
                "summary": "Sink is leaking",
                "project": {"key": "KP"},
                "issuetype": {"name": "Bug"},
                "customfield_10042": 1.5,
            }
        }
        return httpx.Response(201, json={"id": "10010", "key": "KP-1", "self": "https://x/issue/10010"})

    api = make_api(handler)
    payload = IssueScheme(
        fields=IssueFieldsScheme(
            summary="Sink is leaking",
            project=IssueProjectScheme(key="KP"),
            issue_type=IssueTypeScheme(name="Bug"),
        )
    )
    created, response = api.issue.create(ctx, payload, {"customfield_10042": 1.5})
    assert created.key == "KP-1"
    assert response.code == 201


def test_get_issue_keeps_custom_fields(make_api, ctx) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/rest/api/2/issue/KP-1"
        assert request.url.params["fields"] == "summary,customfield_10042"
        assert request.url.params["expand"] == "changelog"
        return httpx.Response(
            200,
            json={
                "id": "10010",
                "key": "KP-1",
                "fields": {"summary": "Sink", "issuetype": {"name": "Bug"}, "customfield_10042": 1.5},
            },
        )

    api = make_api(handler)
    issue, _ = api.issue.get(ctx, "KP-1", ["summary", "customfield_10042"], ["changelog"])
    assert issue.fields.issue_type.name == "Bug"
    assert issue.fields.model_extra == {"customfield_10042": 1.5}


def test_update_delete_assign_move(make_api, ctx) -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        seen.append((request.method, request.url.path, dict(request.url.params), body))
        return httpx.Response(204)

    api = make_api(handler)
    api.issue.update(ctx, "KP-1", False, IssueScheme(fields=IssueFieldsScheme(summary="New")))
    api.issue.assign(ctx, "KP-1", "5b10")
    api.issue.move(ctx, "KP-1", "31", {"resolution": {"name": "Done"}})
    api.issue.delete(ctx, "KP-1", True)
    assert seen == [
        ("PUT", "/rest/api/2/issue/KP-1", {"notifyUsers": "false"}, {"fields": {"summary": "New"}}),
        ("PUT", "/rest/api/2/issue/KP-1/assignee", {}, {"accountId": "5b10"}),
        (
            "POST",
            "/rest/api/2/issue/KP-1/transitions",
            {},
            {"transition": {"id": "31"}, "fields": {"resolution": {"name": "Done"}}},
        ),
        ("DELETE", "/rest/api/2/issue/KP-1", {"deleteSubtasks": "true"}, None),
    ]


def test_transitions(make_api, ctx) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        return httpx.Response(200, json={"transitions": [{"id": "31", "name": "Done", "to": {"name": "Closed"}}]})

    api = make_api(handler)
    transitions, _ = api.issue.transitions(ctx, "KP-1")
    assert transitions.transitions[0].to.name == "Closed"


@pytest.mark.parametrize(
    ("call", "message"),
    [
        (lambda api, ctx: api.issue.get(ctx, ""), "no issue key/id set"),
        (lambda api, ctx: api.issue.assign(ctx, "KP-1", ""), "no account id set"),
        (lambda api, ctx: api.issue.move(ctx, "KP-1", ""), "no transition id set"),
        (lambda api, ctx: api.issue.attachment.add(ctx, "KP-1", "", b"x"), "no attachment filename set"),
        (lambda api, ctx: api.issue.attachment.add(ctx, "KP-1", "a.txt", None), "no reader set"),
        (lambda api, ctx: api.issue.attachment.metadata(ctx, ""), "no attachment id set"),
        (lambda api, ctx: api.issue.search.get(ctx, ""), "no jql set"),
        (lambda api, ctx: api.issue.field.delete(ctx, ""), "no field id set"),
    ],
)
def test_missing_parameters(make_api, ctx, call, message: str) -> None:
    api = make_api(lambda _: httpx.Response(200))
    with pytest.raises(MissingParameterError, match=message):
        call(api, ctx)


def test_add_attachment_uses_multipart(make_api, ctx) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path == "/rest/api/2/issue/KP-1/attachments"
        assert request.headers["Content-Type"].startswith("multipart/form-data; boundary=")
        assert request.headers["X-Atlassian-Token"] == "no-check"
        assert b'name="file"; filename="notes.txt"' in request.content
        assert b"hello jira" in request.content
        return httpx.Response(200, json=[{"id": "10001", "filename": "notes.txt", "size": 10, "mimeType": "text/plain"}])

    api = make_api(handler)
    attachments, _ = api.issue.attachment.add(ctx, "KP-1", "notes.txt", io.BytesIO(b"hello jira"))
    assert attachments[0].mime_type == "text/plain"


def test_attachment_metadata_settings_delete(make_api, ctx) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/rest/api/2/attachment/meta":
            return httpx.Response(200, json={"enabled": True, "uploadLimit": 1000000})
        assert request.url.path == "/rest/api/2/attachment/10001"
        if request.method == "GET":
            return httpx.Response(200, json={"id": "10001", "properties": {"width": 10}})
        return httpx.Response(204)

    api = make_api(handler)
    settings, _ = api.issue.attachment.settings(ctx)
    metadata, _ = api.issue.attachment.metadata(ctx, "10001")
    response = api.issue.attachment.delete(ctx, "10001")
    assert settings.upload_limit == 1000000
    assert metadata.properties == {"width": 10}
    assert response.code == 204


def test_search_get_and_post(make_api, ctx) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/rest/api/2/search"
        if request.method == "GET":
            assert request.url.params["jql"] == "project = KP"
            assert request.url.params["fields"] == "summary,status"
            assert request.url.params["validateQuery"] == "strict"
        else:
            assert json.loads(request.content) == {
                "jql": "project = KP",
                "startAt": 0,
                "maxResults": 2,
                "fields": ["summary", "status"],
                "validateQuery": "strict",
            }
        return httpx.Response(200, json={"startAt": 0, "maxResults": 2, "total": 1, "issues": [{"key": "KP-1"}]})

    api = make_api(handler)
    page, _ = api.issue.search.get(ctx, "project = KP", ["summary", "status"], max_results=2, validate="strict")
    posted, _ = api.issue.search.post(ctx, "project = KP", ["summary", "status"], max_results=2, validate="strict")
    assert page == posted
    assert page.issues[0].key == "KP-1"


def test_fields(make_api, ctx) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/rest/api/2/field":
            if request.method == "POST":
                assert json.loads(request.content) == {
                    "name": "Story points",
                    "type": "com.atlassian.jira.plugin.system.customfieldtypes:float",
                    "searcherKey": "com.atlassian.jira.plugin.system.customfieldtypes:exactnumber",
                }
                return httpx.Response(201, json={"id": "customfield_10042", "custom": True})
            return httpx.Response(200, json=[{"id": "summary", "name": "Summary", "schema": {"type": "string", "system": "summary"}}])
        if request.url.path == "/rest/api/2/field/search":
            assert request.url.params["type"] == "custom"
            assert request.url.params["id"] == "customfield_1,customfield_2"
            return httpx.Response(200, json={"values": [{"id": "customfield_1"}]})
        assert request.url.path == "/rest/api/2/field/customfield_10042"
        assert request.method == "DELETE"
        return httpx.Response(200, json={"self": "https://x/task/1", "id": "1"})

    api = make_api(handler)
    fields, _ = api.issue.field.gets(ctx)
    created, _ = api.issue.field.create(
        ctx,
        CustomFieldScheme(
            name="Story points",
            field_type="com.atlassian.jira.plugin.system.customfieldtypes:float",
            searcher_key="com.atlassian.jira.plugin.system.customfieldtypes:exactnumber",
        ),
    )
    page, _ = api.issue.field.search(ctx, FieldSearchOptions(types=["custom"], ids=["customfield_1", "customfield_2"]), 0, 50)
    task, _ = api.issue.field.delete(ctx, "customfield_10042")
    assert fields[0].schema_.system == "summary"
    assert created.custom is True
    assert page.values[0].id == "customfield_1"
    assert task.id == "1"
