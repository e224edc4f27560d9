from .errors import InvalidVideoId, RestrictedContextError, StoryboardError
from .storyboard import (
    EMPTY_STORYBOARD,
    StoryboardOutcome,
    StoryboardRenderer,
    StoryboardResult,
)
from .video_type import VideoType

__all__ = [
    "EMPTY_STORYBOARD",
    "InvalidVideoId",
    "RestrictedContextError",
    "StoryboardError",
    "StoryboardOutcome",
    "StoryboardRenderer",
    "StoryboardResult",
    "VideoType",
]
