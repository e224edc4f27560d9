"""Trailer fallback for premieres (``LIVE_STREAM_OFFLINE``).

The Android client returns the trailer's player response in an encoded
form, so the web client is asked instead: it embeds the trailer response
unserialized under the playability error screen.
"""

from __future__ import annotations

import structlog

from thumbstrip.domain.entities.storyboard import StoryboardRenderer
from thumbstrip.infrastructure.common.json_nodes import JsonExtractionError, get_path
from thumbstrip.infrastructure.innertube import extractor
from thumbstrip.infrastructure.innertube.fetcher import PlayerResponseFetcher
from thumbstrip.infrastructure.innertube.playability import STATUS_OK, status_of
from thumbstrip.infrastructure.innertube.routes import WEB, ClientPersona

log = structlog.get_logger(__name__)

_TRAILER_PATH = (
    "playabilityStatus",
    "errorScreen",
    "ypcTrailerRenderer",
    "unserializedPlayerResponse",
)


class TrailerFallbackResolver:
    def __init__(
        self,
        *,
        fetcher: PlayerResponseFetcher,
        persona: ClientPersona = WEB,
    ) -> None:
        self._fetcher = fetcher
        self._persona = persona

    async def resolve_trailer(self, video_id: str) -> StoryboardRenderer | None:
        """Fetch the premiere's trailer response and extract its storyboard."""
        result = await self._fetcher.fetch(
            self._persona.route,
            self._persona.build_body(video_id),
            surface_errors=False,
            user_agent=self._persona.user_agent,
        )
        if result.document is None:
            return None

        try:
            unserialized = get_path(result.document, *_TRAILER_PATH)
        except JsonExtractionError:
            log.exception("trailer_player_response_missing", video_id=video_id)
            return None

        if status_of(unserialized) == STATUS_OK:
            return extractor.extract(unserialized)
        return None
