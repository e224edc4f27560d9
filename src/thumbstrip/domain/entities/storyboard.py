"""Domain entities for storyboard resolution.

Pure value objects without I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class StoryboardRenderer:
    """Storyboard specification for one video.

    ``StoryboardRenderer(None, False, None)`` is the ``EMPTY_STORYBOARD``
    sentinel: the video has no storyboard.  A failed resolution is
    represented by ``None``, never by the sentinel.
    """

    spec_url_template: str | None
    is_live_stream: bool = False
    recommended_level: int | None = None

    @property
    def is_empty(self) -> bool:
        return self.spec_url_template is None and not self.is_live_stream


# For videos that have no storyboard (usually low resolution uploads).
# Paid videos where the renderer fetch fails are NOT represented by this.
EMPTY_STORYBOARD = StoryboardRenderer(
    spec_url_template=None, is_live_stream=False, recommended_level=None
)


class StoryboardOutcome(Enum):
    """Tri-state outcome of a storyboard resolution."""

    DATA = "data"
    CONFIRMED_EMPTY = "confirmed_empty"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class StoryboardResult:
    """Tagged resolution result.

    ``DATA`` always carries a non-empty renderer; ``CONFIRMED_EMPTY`` and
    ``UNRESOLVED`` never carry one.
    """

    outcome: StoryboardOutcome
    renderer: StoryboardRenderer | None = None

    def __post_init__(self) -> None:
        has_data = self.renderer is not None and not self.renderer.is_empty
        if (self.outcome is StoryboardOutcome.DATA) != has_data:
            raise ValueError(
                f"{self.outcome.name} result inconsistent with renderer {self.renderer!r}"
            )

    @classmethod
    def from_renderer(cls, renderer: StoryboardRenderer | None) -> StoryboardResult:
        """Map a nullable resolver result onto the tagged representation."""
        if renderer is None:
            return cls(StoryboardOutcome.UNRESOLVED)
        if renderer.is_empty:
            return cls(StoryboardOutcome.CONFIRMED_EMPTY)
        return cls(StoryboardOutcome.DATA, renderer)

    @property
    def found(self) -> bool:
        """True when upstream answered authoritatively (data or empty)."""
        return self.outcome is not StoryboardOutcome.UNRESOLVED

    def to_dict(self) -> dict[str, Any]:
        renderer = self.renderer
        return {
            "outcome": self.outcome.value,
            "spec_url_template": renderer.spec_url_template if renderer else None,
            "is_live_stream": renderer.is_live_stream if renderer else False,
            "recommended_level": renderer.recommended_level if renderer else None,
        }
