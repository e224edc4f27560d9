from .storyboard_lookup import StoryboardLookupUseCase

__all__ = ["StoryboardLookupUseCase"]
