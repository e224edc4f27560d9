"""Port for resolving a video id to its storyboard renderer."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from thumbstrip.domain.entities.storyboard import StoryboardRenderer


@runtime_checkable
class StoryboardResolverPort(Protocol):
    """Resolves a video id to a storyboard renderer.

    Implementations absorb every upstream failure; the caller only sees
    the tri-state result.
    """

    async def resolve(self, video_id: str) -> StoryboardRenderer | None:
        """Resolve the storyboard of *video_id*.

        Returns a renderer, the ``EMPTY_STORYBOARD`` sentinel when the video
        has no storyboard, or None if no client could determine it.
        """
        ...
