"""Common infrastructure utilities."""

from __future__ import annotations

from .json_nodes import (
    JsonExtractionError,
    JsonNotFound,
    JsonTypeMismatch,
    get_int,
    get_object,
    get_path,
    get_string,
    has,
)

__all__ = [
    "JsonExtractionError",
    "JsonNotFound",
    "JsonTypeMismatch",
    "get_int",
    "get_object",
    "get_path",
    "get_string",
    "has",
]
