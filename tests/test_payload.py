from __future__ import annotations

import json
from collections import namedtuple
from dataclasses import dataclass

import pytest

from jira_rest.errors import NilPayloadError, NonPayloadPointerError, PayloadError
from jira_rest.http_client import encode_payload
from jira_rest.models import ScreenScheme, WorkflowTransitionPayloadScheme


@dataclass
class Rename:
    name: str
    description: str


def test_nil_payload_rejected() -> None:
    with pytest.raises(NilPayloadError, match="nil payload"):
        encode_payload(None)


@pytest.mark.parametrize("value", [ScreenScheme, ("A", "B"), namedtuple("Pair", "name description")("A", "B")])
def test_bare_aggregates_rejected(value) -> None:
    with pytest.raises(NonPayloadPointerError, match="non-payload pointer expected"):
        encode_payload(value)


def test_payload_errors_are_type_errors() -> None:
    with pytest.raises(TypeError):
        encode_payload(None)
    assert issubclass(PayloadError, TypeError)


def test_model_round_trip() -> None:
    screen = ScreenScheme(id=1, name="A", description="B")
    reader = encode_payload(screen)
    assert ScreenScheme.model_validate_json(reader.read()) == screen


def test_model_dumped_by_alias_without_none() -> None:
    transition = WorkflowTransitionPayloadScheme(name="Done", to="2", type="directed", from_=["1"])
    assert json.loads(encode_payload(transition).read()) == {"name": "Done", "to": "2", "type": "directed", "from": ["1"]}


@pytest.mark.parametrize("value", [{"name": "A"}, [{"accountId": "1"}], {}])
def test_mappings_and_lists_accepted(value) -> None:
    assert json.loads(encode_payload(value).read()) == value


def test_dataclass_instance_accepted() -> None:
    assert json.loads(encode_payload(Rename("A", "B")).read()) == {"name": "A", "description": "B"}


@dataclass
class Transition:
    workflow: str
    transition: WorkflowTransitionPayloadScheme
    screen: ScreenScheme | None = None


def test_dataclass_with_models_dumped_by_alias() -> None:
    value = Transition("Software", WorkflowTransitionPayloadScheme(name="Done", to="2", type="directed", from_=["1"]))
    assert json.loads(encode_payload(value).read()) == {
        "workflow": "Software",
        "transition": {"name": "Done", "to": "2", "type": "directed", "from": ["1"]},
    }
