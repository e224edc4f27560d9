"""Storyboard renderer extraction from playable player responses."""

from __future__ import annotations

from typing import Any, Mapping

import structlog

from thumbstrip.domain.entities.storyboard import EMPTY_STORYBOARD, StoryboardRenderer
from thumbstrip.infrastructure.common.json_nodes import (
    JsonExtractionError,
    get_int,
    get_object,
    get_string,
    has,
)

log = structlog.get_logger(__name__)

_LIVE_RENDERER = "playerLiveStoryboardSpecRenderer"
_VOD_RENDERER = "playerStoryboardSpecRenderer"


def extract(doc: Mapping[str, Any]) -> StoryboardRenderer | None:
    """Extract the storyboard renderer from a response with status ``OK``.

    - No ``storyboards`` key: the video has no storyboard, returns
      ``EMPTY_STORYBOARD``.
    - A live renderer wins over the on-demand one when both are present.
    - Any structural mismatch is a parse failure and returns None,
      not the empty sentinel.
    """
    if not has(doc, "storyboards"):
        log.debug("storyboard_empty")
        return EMPTY_STORYBOARD

    try:
        storyboards = get_object(doc, "storyboards")
        is_live_stream = has(storyboards, _LIVE_RENDERER)
        element = get_object(
            storyboards, _LIVE_RENDERER if is_live_stream else _VOD_RENDERER
        )
        renderer = StoryboardRenderer(
            spec_url_template=get_string(element, "spec"),
            is_live_stream=is_live_stream,
            recommended_level=(
                get_int(element, "recommendedLevel")
                if has(element, "recommendedLevel")
                else None
            ),
        )
    except JsonExtractionError:
        log.exception("storyboard_renderer_parse_failed")
        return None

    log.debug("storyboard_renderer_extracted", renderer=renderer)
    return renderer
