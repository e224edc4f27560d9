from __future__ import annotations

from enum import Enum


class VideoType(Enum):
    """Music video type reported by the player."""

    MUSIC_VIDEO_TYPE_UNKNOWN = "MUSIC_VIDEO_TYPE_UNKNOWN"
    MUSIC_VIDEO_TYPE_ATV = "MUSIC_VIDEO_TYPE_ATV"
    MUSIC_VIDEO_TYPE_OMV = "MUSIC_VIDEO_TYPE_OMV"
    MUSIC_VIDEO_TYPE_UGC = "MUSIC_VIDEO_TYPE_UGC"
    MUSIC_VIDEO_TYPE_SHOULDER = "MUSIC_VIDEO_TYPE_SHOULDER"
    MUSIC_VIDEO_TYPE_OFFICIAL_SOURCE_MUSIC = "MUSIC_VIDEO_TYPE_OFFICIAL_SOURCE_MUSIC"
    MUSIC_VIDEO_TYPE_PRIVATELY_OWNED_TRACK = "MUSIC_VIDEO_TYPE_PRIVATELY_OWNED_TRACK"
    MUSIC_VIDEO_TYPE_LIVE_STREAM = "MUSIC_VIDEO_TYPE_LIVE_STREAM"
    MUSIC_VIDEO_TYPE_PODCAST_EPISODE = "MUSIC_VIDEO_TYPE_PODCAST_EPISODE"

    @classmethod
    def from_name(cls, name: str) -> VideoType | None:
        """Return the member called *name*, or None for unknown names."""
        return cls.__members__.get(name)

    def is_music_video(self) -> bool:
        return self is VideoType.MUSIC_VIDEO_TYPE_OMV
