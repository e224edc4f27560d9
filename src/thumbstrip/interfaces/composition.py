"""Composition root: wires config into the storyboard resolution graph."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from thumbstrip.application.use_cases import StoryboardLookupUseCase
from thumbstrip.domain.ports import ContextGuardPort, NotificationPort
from thumbstrip.infrastructure.config.schema import AppConfig
from thumbstrip.infrastructure.context_guard import ThreadContextGuard
from thumbstrip.infrastructure.innertube import (
    ClientChainResolver,
    PlayerResponseFetcher,
    TrailerFallbackResolver,
    build_client_factory,
)
from thumbstrip.infrastructure.notifications import LogNotifier

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Container:
    """Fully wired components for one process."""

    config: AppConfig
    notifier: NotificationPort
    guard: ContextGuardPort
    resolver: ClientChainResolver
    lookup: StoryboardLookupUseCase


def build_container(
    config: AppConfig,
    *,
    notifier: NotificationPort | None = None,
    guard: ContextGuardPort | None = None,
) -> Container:
    """Build the resolver graph.

    Order matters:
        1. Notifier + context guard (ports supplied by the host, or defaults)
        2. Fetcher (client factory from http.* / innertube.* config)
        3. Trailer fallback + client chain resolver
        4. Lookup use case
    """
    notifier = notifier or LogNotifier(enabled=config.notifications_enabled)
    guard = guard or ThreadContextGuard()

    fetcher = PlayerResponseFetcher(
        client_factory=build_client_factory(
            timeout_seconds=config.http_timeout_seconds,
            user_agent=config.http_user_agent,
        ),
        notifier=notifier,
        guard=guard,
        base_url=config.innertube_base_url,
        api_key=config.innertube_api_key,
    )
    resolver = ClientChainResolver(
        fetcher=fetcher,
        trailer=TrailerFallbackResolver(fetcher=fetcher),
    )
    lookup = StoryboardLookupUseCase(resolver=resolver)

    log.debug(
        "container_built",
        base_url=config.innertube_base_url,
        timeout=config.http_timeout_seconds,
    )
    return Container(
        config=config,
        notifier=notifier,
        guard=guard,
        resolver=resolver,
        lookup=lookup,
    )
