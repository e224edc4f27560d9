"""InnerTube player-response adapters for storyboard resolution."""

from __future__ import annotations

from .fetcher import (
    FetchFailure,
    FetchFailureKind,
    FetchResult,
    PlayerResponseFetcher,
    build_client_factory,
)
from .resolver import ClientChainResolver
from .trailer import TrailerFallbackResolver

__all__ = [
    "ClientChainResolver",
    "FetchFailure",
    "FetchFailureKind",
    "FetchResult",
    "PlayerResponseFetcher",
    "TrailerFallbackResolver",
    "build_client_factory",
]
