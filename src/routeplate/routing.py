"""Route template compilation and path matching."""

from __future__ import annotations

import logging

from routeplate.models import MatchResult, RouteDescriptor
from routeplate.normalize import normalize_path

logger = logging.getLogger(__name__)


def compile(template: str) -> RouteDescriptor:
    """Compile ``users/{username}/account/{id}`` into a :class:`RouteDescriptor`.

    Never fails: literal text is escaped, so every template yields a valid
    pattern. ``{}`` declares a parameter named ``""``.
    """
    descriptor = RouteDescriptor(name=normalize_path(template))
    logger.debug(
        "Compiled route %r -> %r (params=%r)",
        descriptor.name,
        descriptor.pattern.pattern,
        descriptor.params,
    )
    return descriptor


def match(
    request_path: str | None,
    descriptor: RouteDescriptor,
    *,
    max_length: int | None = None,
) -> MatchResult | None:
    """Match *request_path* against *descriptor*, or return ``None``.

    The path is normalized and lower-cased before matching, so extracted
    values are lower-case while ``result.route`` keeps the caller's string.
    The match only needs to cover a prefix of the path:
    ``/users/nic/account/1/extra`` matches ``users/{username}/account/{id}``.

    Gives the same answer as running ``descriptor.pattern`` at offset 0, in
    time linear in the path length.

    Parameters
    ----------
    max_length:
        When set, normalized paths longer than this are rejected outright.
    """
    if not request_path:
        return None

    path = normalize_path(request_path).lower()
    if max_length is not None and len(path) > max_length:
        return None

    values = _scan(path, descriptor.literals)
    if values is None:
        return None
    matched, captures = values

    parameters: dict[str, str] = {}
    for name, value in zip(descriptor.params, captures):
        parameters[name] = value
    return MatchResult(match=matched, route=request_path, parameters=parameters)


def _scan(path: str, literals: tuple[str, ...]) -> tuple[str, list[str]] | None:
    """Walk *path* from offset 0, taking the nearest occurrence of each literal.

    Every group is a lazy ``.*?`` with only literals between groups, so the
    nearest occurrence is the one the regex would settle on, and a miss there
    is a miss everywhere. Captures may not span a newline, as with ``.``.
    """
    first = literals[0]
    if not path.startswith(first):
        return None

    pos = len(first)
    captures: list[str] = []
    for literal in literals[1:]:
        end = path.find(literal, pos)
        if end < 0:
            return None
        value = path[pos:end]
        if "\n" in value:
            return None
        captures.append(value)
        pos = end + len(literal)
    return path[:pos], captures
