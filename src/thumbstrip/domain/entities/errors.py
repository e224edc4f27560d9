from __future__ import annotations


class StoryboardError(Exception):
    """Base error for storyboard domain/usecases."""


class InvalidVideoId(StoryboardError):
    """Video identifier is empty or not shaped like a video id."""


class RestrictedContextError(AssertionError):
    """Network I/O was attempted on a restricted (UI/latency-bound) context.

    This is a programming error: it is never converted into a fetch failure.
    """
