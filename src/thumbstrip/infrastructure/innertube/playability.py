"""Playability status lookup on player responses."""

from __future__ import annotations

from typing import Any, Mapping

import structlog

from thumbstrip.infrastructure.common.json_nodes import (
    JsonExtractionError,
    get_object,
    get_string,
)

log = structlog.get_logger(__name__)

STATUS_OK = "OK"
STATUS_LIVE_STREAM_OFFLINE = "LIVE_STREAM_OFFLINE"


def status_of(doc: Mapping[str, Any]) -> str:
    """Return ``playabilityStatus.status``, or ``""`` when it cannot be read.

    ``""`` means unknown and falls in the same bucket as any other
    non load-bearing status.
    """
    try:
        return get_string(get_object(doc, "playabilityStatus"), "status")
    except JsonExtractionError as exc:
        log.debug("playability_status_missing", error=str(exc), response=doc)
        return ""
