"""
Tag-list serialization.

The `data.words` column stores tags as a string-encoded list, e.g.
`['harbour', 'fire', 'mayor']`. The API only ever exposes `list[str]`;
these two functions are the whole contract between the two shapes.

Quoted tokens use Python string-literal escaping (`\\'`, `\\\\`, `\\n`, `\\xNN`,
...), so `parse_tags(format_tags(tags))` returns the cleaned `tags`.
"""

from __future__ import annotations

import re
from typing import Iterable

# A single- or double-quoted token, backslash escapes allowed inside.
# Commas inside quotes belong to the token.
_QUOTED = re.compile(r"'((?:[^'\\]|\\.)*)'|\"((?:[^\"\\]|\\.)*)\"", re.DOTALL)

_ESCAPE = re.compile(r"\\(x[0-9a-fA-F]{2}|u[0-9a-fA-F]{4}|U[0-9a-fA-F]{8}|.)", re.DOTALL)
_SIMPLE_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "0": "\0"}


def _unescape_char(match: re.Match[str]) -> str:
    code = match.group(1)
    if len(code) > 1:
        return chr(int(code[1:], 16))
    return _SIMPLE_ESCAPES.get(code, code)


def _unescape(token: str) -> str:
    return _ESCAPE.sub(_unescape_char, token)


def _clean(tokens: Iterable[str]) -> list[str]:
    return [t.strip() for t in tokens if t and t.strip()]


def parse_tags(raw: str | list[str] | None) -> list[str]:
    """
    Decode a stored tag list into a list of tags.

    Accepts the bracketed/quoted encoding, a bare comma-separated string, or a
    value the driver already returned as a list.
    """
    if raw is None:
        return []
    if isinstance(raw, list):
        return _clean(str(t) for t in raw)

    body = raw.strip()
    if body.startswith("["):
        body = body[1:]
    if body.endswith("]"):
        body = body[:-1]
    if not body.strip():
        return []

    quoted = _QUOTED.findall(body)
    if quoted:
        return _clean(_unescape(single or double) for single, double in quoted)
    return _clean(body.split(","))


def format_tags(tags: Iterable[str]) -> str:
    """
    Encode tags the way they are stored: `['a', 'b']`.

    A tag containing a single quote is wrapped in double quotes instead.
    """
    return "[" + ", ".join(repr(t) for t in _clean(tags)) + "]"
