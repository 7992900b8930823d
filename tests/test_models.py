"""Tests for RouteDescriptor and MatchResult."""

from __future__ import annotations

import json
import re

import pytest
from pydantic import ValidationError

from routeplate import MatchResult, RouteDescriptor, compile, match

# -- RouteDescriptor -------------------------------------------------------


def test_params_must_agree_with_name() -> None:
    with pytest.raises(ValidationError, match="do not match template"):
        RouteDescriptor(name="/users/{id}/", params=(), pattern=re.compile("/users/(.*?)/"))


def test_pattern_must_agree_with_name() -> None:
    with pytest.raises(ValidationError, match="does not match template"):
        RouteDescriptor(name="/users/{id}/", params=("id",), pattern="/admin/(.*?)/")


def test_name_alone_builds_descriptor() -> None:
    route = RouteDescriptor(name="users/{username}/account/{id}")
    assert route == compile("users/{username}/account/{id}")
    assert route.literals == ("/users/", "/account/", "/")


def test_hand_edited_json_is_rejected() -> None:
    data = json.loads(compile("users/{id}").model_dump_json())
    data["name"] = "/admin/{id}/"
    with pytest.raises(ValidationError, match="does not match template"):
        RouteDescriptor.model_validate_json(json.dumps(data))


def test_json_with_name_only_recompiles() -> None:
    route = RouteDescriptor.model_validate_json('{"name": "/a/{x}/b/{x}/"}')
    assert route == compile("a/{x}/b/{x}")
    assert match("/a/1/b/2", route) is not None


def test_accepts_pattern_string() -> None:
    route = RouteDescriptor(name="/users/{id}/", params=("id",), pattern="/users/(.*?)/")
    assert route.pattern.groups == 1
    assert match("/users/9", route) is not None


def test_descriptor_is_frozen() -> None:
    route = compile("users/{id}")
    with pytest.raises(ValidationError):
        route.name = "/other/"  # type: ignore[misc]


def test_json_round_trip() -> None:
    route = compile("users/{username}/account/{id}")
    data = json.loads(route.model_dump_json())
    assert data == {
        "name": "/users/{username}/account/{id}/",
        "params": ["username", "id"],
        "pattern": route.pattern.pattern,
    }
    assert RouteDescriptor.model_validate_json(route.model_dump_json()) == route


def test_python_dump_keeps_compiled_pattern() -> None:
    route = compile("users/{id}")
    assert isinstance(route.model_dump()["pattern"], re.Pattern)


def test_repr() -> None:
    assert repr(compile("users/{id}")) == "RouteDescriptor('/users/{id}/', params=['id'])"


# -- MatchResult -----------------------------------------------------------


def test_match_result_aliases() -> None:
    result = match("/Users/Nic/Account/1/blabla", compile("users/{username}/account/{id}"))
    assert result is not None
    assert result.matched_prefix == result.match == "/users/nic/account/1/"
    assert result.original_path == result.route == "/Users/Nic/Account/1/blabla"
    assert result.remainder == "blabla/"


def test_remainder_empty_on_full_match() -> None:
    result = match("/users/1", compile("users/{id}"))
    assert result is not None
    assert result.remainder == ""


def test_match_result_serializes() -> None:
    result = MatchResult(match="/a/1/", route="/a/1", parameters={"x": "1"})
    assert json.loads(result.model_dump_json()) == {
        "match": "/a/1/",
        "route": "/a/1",
        "parameters": {"x": "1"},
    }


def test_match_result_parameters_are_read_only() -> None:
    result = match("/a/1", compile("a/{x}"))
    assert result is not None
    with pytest.raises(TypeError):
        result.parameters["x"] = "2"  # type: ignore[index]
    assert result.parameters == {"x": "1"}
    assert MatchResult(match="/", route="/").parameters == {}


def test_match_result_is_frozen() -> None:
    result = MatchResult(match="/", route="/")
    with pytest.raises(ValidationError):
        result.route = "/x"  # type: ignore[misc]
