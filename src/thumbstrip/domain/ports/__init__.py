from .context_guard import ContextGuardPort
from .notification import NotificationPort
from .storyboard_resolver import StoryboardResolverPort

__all__ = [
    "ContextGuardPort",
    "NotificationPort",
    "StoryboardResolverPort",
]
