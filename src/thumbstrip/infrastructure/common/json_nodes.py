"""Typed accessors for parsed JSON trees.

``httpx.Response.json()`` yields plain dicts/lists.  These helpers give
strict, typed lookups that fail with :class:`JsonNotFound` or
:class:`JsonTypeMismatch` instead of silently returning defaults.
"""

from __future__ import annotations

from typing import Any, Mapping

JsonObject = Mapping[str, Any]


class JsonExtractionError(Exception):
    """Structural mismatch while reading a JSON tree."""


class JsonNotFound(JsonExtractionError, KeyError):
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "key not found"


class JsonTypeMismatch(JsonExtractionError, TypeError):
    pass


def has(node: JsonObject, key: str) -> bool:
    return key in node


def _require(node: Any, key: str) -> Any:
    if not isinstance(node, Mapping):
        raise JsonTypeMismatch(f"Expected object to look up {key!r}, got {type(node).__name__}")
    try:
        return node[key]
    except KeyError:
        raise JsonNotFound(f"No value for {key!r}") from None


def get_object(node: JsonObject, key: str) -> JsonObject:
    value = _require(node, key)
    if not isinstance(value, Mapping):
        raise JsonTypeMismatch(f"{key!r} is not an object: {type(value).__name__}")
    return value


def get_string(node: JsonObject, key: str) -> str:
    value = _require(node, key)
    if not isinstance(value, str):
        raise JsonTypeMismatch(f"{key!r} is not a string: {type(value).__name__}")
    return value


def get_int(node: JsonObject, key: str) -> int:
    value = _require(node, key)
    # bool is an int subclass; JSON true/false is not a number.
    if isinstance(value, bool) or not isinstance(value, int):
        raise JsonTypeMismatch(f"{key!r} is not an integer: {type(value).__name__}")
    return value


def get_path(node: JsonObject, *keys: str) -> JsonObject:
    """Follow *keys* through nested objects, e.g. ``get_path(d, "a", "b")``."""
    current = node
    for key in keys:
        current = get_object(current, key)
    return current
