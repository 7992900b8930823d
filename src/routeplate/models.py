"""Route descriptor and match result models."""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from routeplate.normalize import normalize_path
from routeplate.template import build_pattern, split_template


class RouteDescriptor(BaseModel):
    """A compiled route template.

    Only *name* is authoritative: *params* and *pattern* are always derived
    from it, so ``RouteDescriptor(name="users/{id}")`` or a descriptor loaded
    from JSON is the same as ``compile("users/{id}")``. Passing *params* or
    *pattern* that disagree with *name* is an error.

    Parameters
    ----------
    name:
        The normalized template, e.g. ``/users/{username}/account/{id}/``.
    params:
        Placeholder names in order of appearance, repeats included.
    pattern:
        Unanchored pattern with one lazy capture group per entry in *params*.
    literals:
        The text between placeholders; ``len(literals) == len(params) + 1``.
        Not serialized.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    params: tuple[str, ...]
    pattern: re.Pattern[str]
    literals: tuple[str, ...] = Field(exclude=True, repr=False)

    @model_validator(mode="before")
    @classmethod
    def _derive_from_name(cls, data: Any) -> Any:
        if not isinstance(data, Mapping) or not isinstance(data.get("name"), str):
            return data

        name = normalize_path(data["name"])
        params, literals = split_template(name)
        pattern = build_pattern(literals)

        given_params = data.get("params")
        if given_params is not None and tuple(given_params) != params:
            msg = f"Params {list(given_params)!r} do not match template {name!r}, expected {list(params)!r}"
            raise ValueError(msg)
        given_pattern = data.get("pattern")
        if given_pattern is not None:
            source = given_pattern.pattern if isinstance(given_pattern, re.Pattern) else given_pattern
            if source != pattern:
                msg = f"Pattern {source!r} does not match template {name!r}, expected {pattern!r}"
                raise ValueError(msg)

        return {"name": name, "params": params, "pattern": pattern, "literals": literals}

    @field_serializer("pattern", when_used="json")
    def _serialize_pattern(self, pattern: re.Pattern[str]) -> str:
        return pattern.pattern

    def __repr__(self) -> str:
        return f"RouteDescriptor({self.name!r}, params={list(self.params)!r})"


class MatchResult(BaseModel):
    """Result of a successful match.

    *parameters* is a read-only mapping; copy it with ``dict()`` to edit.
    """

    model_config = ConfigDict(frozen=True)

    match: str
    route: str
    parameters: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("parameters")
    @classmethod
    def _freeze_parameters(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("parameters")
    def _serialize_parameters(self, parameters: Mapping[str, str]) -> dict[str, str]:
        return dict(parameters)

    @property
    def matched_prefix(self) -> str:
        return self.match

    @property
    def original_path(self) -> str:
        return self.route

    @property
    def remainder(self) -> str:
        """The normalized path left over after the matched prefix.

        Feed it to a nested descriptor to match sub-routes.
        """
        return normalize_path(self.route).lower()[len(self.match) :]
