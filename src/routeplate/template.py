"""Placeholder scanning for normalized route templates."""

from __future__ import annotations

import re

_PLACEHOLDER_RE = re.compile(r"\{(.*?)\}")
_WILDCARD = "(.*?)"


def split_template(name: str) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Split *name* into ``(params, literals)``.

    ``"/users/{id}/"`` -> ``(("id",), ("/users/", "/"))``. There is always
    one more literal than there are params; literal *i* precedes param *i*.
    Each token is cut at its first occurrence in the text that remains, so
    a repeated ``{x}`` yields one param per position.
    """
    tokens = [m.group(0) for m in _PLACEHOLDER_RE.finditer(name)]
    literals: list[str] = []
    rest = name
    for token in tokens:
        before, _, rest = rest.partition(token)
        literals.append(before)
    literals.append(rest)
    return tuple(token[1:-1] for token in tokens), tuple(literals)


def build_pattern(literals: tuple[str, ...]) -> str:
    """Join escaped *literals* with lazy wildcard groups."""
    return _WILDCARD.join(re.escape(literal) for literal in literals)
