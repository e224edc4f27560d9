"""Shared test fixtures for the thumbstrip test suite."""

from __future__ import annotations

import json
from typing import Any, Callable, Mapping

import httpx
import pytest

from thumbstrip.infrastructure.context_guard import ThreadContextGuard
from thumbstrip.infrastructure.innertube import (
    ClientChainResolver,
    PlayerResponseFetcher,
    TrailerFallbackResolver,
    build_client_factory,
)
from thumbstrip.infrastructure.notifications import RecordingNotifier

BASE_URL = "https://innertube.test/youtubei/v1/"

# ---------------------------------------------------------------------------
# Player response builders
# ---------------------------------------------------------------------------


def _build_player_response(
    status: str | None = "OK",
    *,
    spec: str | None = None,
    live_spec: str | None = None,
    recommended_level: int | None = None,
    trailer: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    doc: dict[str, Any] = {}
    if status is not None:
        doc["playabilityStatus"] = {"status": status}
    if trailer is not None:
        doc.setdefault("playabilityStatus", {})["errorScreen"] = {
            "ypcTrailerRenderer": {"unserializedPlayerResponse": dict(trailer)}
        }

    storyboards: dict[str, Any] = {}
    if spec is not None:
        storyboards["playerStoryboardSpecRenderer"] = {"spec": spec}
    if live_spec is not None:
        storyboards["playerLiveStoryboardSpecRenderer"] = {"spec": live_spec}
    if recommended_level is not None:
        for renderer in storyboards.values():
            renderer["recommendedLevel"] = recommended_level
    if storyboards:
        doc["storyboards"] = storyboards
    return doc


@pytest.fixture()
def player_response() -> Callable[..., dict[str, Any]]:
    """Factory for InnerTube player response dicts."""
    return _build_player_response


def client_name_of(request: httpx.Request) -> str:
    return json.loads(request.content)["context"]["client"]["clientName"]


@pytest.fixture()
def client_dispatch() -> Callable[[Mapping[str, Any]], Callable[[httpx.Request], httpx.Response]]:
    """Build a respx side effect answering per InnerTube client name.

    Values are ``httpx.Response`` objects, exceptions (raised), or dicts
    (served as a 200 JSON body).  Unlisted clients get a 500.
    """

    def build(responses: Mapping[str, Any]) -> Callable[[httpx.Request], httpx.Response]:
        def handler(request: httpx.Request) -> httpx.Response:
            answer = responses.get(client_name_of(request))
            if answer is None:
                return httpx.Response(500)
            if isinstance(answer, BaseException):
                raise answer
            if isinstance(answer, httpx.Response):
                return answer
            return httpx.Response(200, json=answer)

        return handler

    return build


@pytest.fixture()
def called_clients() -> Callable[[Any], list[str]]:
    """Return the client names seen by a respx route, in call order."""

    def collect(route: Any) -> list[str]:
        return [client_name_of(call.request) for call in route.calls]

    return collect


# ---------------------------------------------------------------------------
# Component fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def guard() -> ThreadContextGuard:
    return ThreadContextGuard()


@pytest.fixture()
def fetcher(notifier: RecordingNotifier, guard: ThreadContextGuard) -> PlayerResponseFetcher:
    return PlayerResponseFetcher(
        client_factory=build_client_factory(timeout_seconds=5.0),
        notifier=notifier,
        guard=guard,
        base_url=BASE_URL,
    )


@pytest.fixture()
def trailer(fetcher: PlayerResponseFetcher) -> TrailerFallbackResolver:
    return TrailerFallbackResolver(fetcher=fetcher)


@pytest.fixture()
def resolver(
    fetcher: PlayerResponseFetcher, trailer: TrailerFallbackResolver
) -> ClientChainResolver:
    return ClientChainResolver(fetcher=fetcher, trailer=trailer)
