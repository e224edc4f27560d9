from __future__ import annotations

import re

import structlog

from thumbstrip.domain.entities import InvalidVideoId, StoryboardResult
from thumbstrip.domain.ports import StoryboardResolverPort

log = structlog.get_logger(__name__)

_VIDEO_ID_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


class StoryboardLookupUseCase:
    def __init__(self, *, resolver: StoryboardResolverPort) -> None:
        self._resolver = resolver

    async def execute(self, video_id: str) -> StoryboardResult:
        cleaned = (video_id or "").strip()
        if not _VIDEO_ID_RE.match(cleaned):
            raise InvalidVideoId(video_id)

        result = StoryboardResult.from_renderer(await self._resolver.resolve(cleaned))
        log.info(
            "storyboard_lookup_finished",
            video_id=cleaned,
            outcome=result.outcome.value,
        )
        return result
