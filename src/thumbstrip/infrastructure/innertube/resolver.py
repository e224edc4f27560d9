"""Client chain resolver: tries InnerTube client personas in order."""

from __future__ import annotations

import asyncio

import structlog

from thumbstrip.domain.entities.storyboard import StoryboardRenderer
from thumbstrip.infrastructure.innertube import extractor
from thumbstrip.infrastructure.innertube.fetcher import PlayerResponseFetcher
from thumbstrip.infrastructure.innertube.playability import (
    STATUS_LIVE_STREAM_OFFLINE,
    STATUS_OK,
    status_of,
)
from thumbstrip.infrastructure.innertube.routes import CHAIN_ORDER, ClientPersona
from thumbstrip.infrastructure.innertube.trailer import TrailerFallbackResolver

log = structlog.get_logger(__name__)


class ClientChainResolver:
    """Resolves storyboard renderers with a fixed client fallback chain.

    Implements ``StoryboardResolverPort``.  Order: Android (silent), then
    TV embedded (failures surfaced).  A ``LIVE_STREAM_OFFLINE`` status on
    either attempt runs the web trailer fallback exactly once.  Attempts
    are sequential and the first non-None renderer wins.
    """

    def __init__(
        self,
        *,
        fetcher: PlayerResponseFetcher,
        trailer: TrailerFallbackResolver | None = None,
        personas: tuple[ClientPersona, ...] = CHAIN_ORDER,
    ) -> None:
        self._fetcher = fetcher
        self._trailer = trailer or TrailerFallbackResolver(fetcher=fetcher)
        self._personas = personas

    async def _resolve_with(
        self, persona: ClientPersona, video_id: str
    ) -> StoryboardRenderer | None:
        result = await self._fetcher.fetch(
            persona.route,
            persona.build_body(video_id),
            surface_errors=persona.surface_errors,
            user_agent=persona.user_agent,
        )
        if result.document is None:
            return None

        status = status_of(result.document)
        if status == STATUS_OK:
            return extractor.extract(result.document)
        if status == STATUS_LIVE_STREAM_OFFLINE:
            # Premiere placeholder: storyboard comes from the trailer.
            return await self._trailer.resolve_trailer(video_id)

        log.debug(
            "storyboard_not_playable",
            video_id=video_id,
            client=persona.name,
            status=status,
        )
        return None

    async def resolve(self, video_id: str) -> StoryboardRenderer | None:
        """Return a renderer, ``EMPTY_STORYBOARD``, or None if unresolved."""
        if not isinstance(video_id, str) or not video_id:
            raise ValueError("video_id must be a non-empty string")

        for persona in self._personas:
            renderer = await self._resolve_with(persona, video_id)
            if renderer is not None:
                log.debug(
                    "storyboard_resolved",
                    video_id=video_id,
                    client=persona.name,
                    empty=renderer.is_empty,
                )
                return renderer
            log.debug(
                "storyboard_client_unavailable",
                video_id=video_id,
                client=persona.name,
            )

        return None

    def resolve_blocking(self, video_id: str) -> StoryboardRenderer | None:
        """Run :meth:`resolve` to completion for callers without an event loop."""
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.resolve(video_id))
        raise RuntimeError("resolve_blocking() called from a running event loop")
