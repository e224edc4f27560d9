"""Tests for TrailerFallbackResolver (premiere placeholder storyboards)."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest
import respx

from thumbstrip.domain.entities import EMPTY_STORYBOARD, StoryboardRenderer
from thumbstrip.infrastructure.innertube.trailer import TrailerFallbackResolver
from thumbstrip.infrastructure.notifications import RecordingNotifier

_PLAYER_URL = "https://innertube.test/youtubei/v1/player"


class TestResolveTrailer:
    @respx.mock
    @pytest.mark.asyncio()
    async def test_uses_web_client(
        self,
        trailer: TrailerFallbackResolver,
        player_response: Callable[..., dict[str, Any]],
    ) -> None:
        nested = player_response("OK", spec="https://y/sb.xml")
        route = respx.post(_PLAYER_URL).respond(
            200, json=player_response("LIVE_STREAM_OFFLINE", trailer=nested)
        )

        await trailer.resolve_trailer("live1")

        body = json.loads(route.calls.last.request.content)
        assert body["context"]["client"]["clientName"] == "WEB"
        assert body["videoId"] == "live1"

    @respx.mock
    @pytest.mark.asyncio()
    async def test_extracts_nested_storyboard(
        self,
        trailer: TrailerFallbackResolver,
        player_response: Callable[..., dict[str, Any]],
    ) -> None:
        nested = player_response("OK", spec="https://y/sb.xml", recommended_level=1)
        respx.post(_PLAYER_URL).respond(
            200, json=player_response("LIVE_STREAM_OFFLINE", trailer=nested)
        )

        result = await trailer.resolve_trailer("live1")

        assert result == StoryboardRenderer("https://y/sb.xml", False, 1)

    @respx.mock
    @pytest.mark.asyncio()
    async def test_nested_without_storyboards_is_empty(
        self,
        trailer: TrailerFallbackResolver,
        player_response: Callable[..., dict[str, Any]],
    ) -> None:
        respx.post(_PLAYER_URL).respond(
            200, json=player_response("LIVE_STREAM_OFFLINE", trailer=player_response("OK"))
        )

        assert await trailer.resolve_trailer("live1") is EMPTY_STORYBOARD

    @respx.mock
    @pytest.mark.asyncio()
    async def test_nested_not_ok_returns_none(
        self,
        trailer: TrailerFallbackResolver,
        player_response: Callable[..., dict[str, Any]],
    ) -> None:
        nested = player_response("UNPLAYABLE", spec="https://y/sb.xml")
        respx.post(_PLAYER_URL).respond(
            200, json=player_response("LIVE_STREAM_OFFLINE", trailer=nested)
        )

        assert await trailer.resolve_trailer("live1") is None

    @respx.mock
    @pytest.mark.asyncio()
    async def test_missing_trailer_path_returns_none(
        self,
        trailer: TrailerFallbackResolver,
        player_response: Callable[..., dict[str, Any]],
    ) -> None:
        route = respx.post(_PLAYER_URL).respond(
            200, json=player_response("LIVE_STREAM_OFFLINE")
        )

        assert await trailer.resolve_trailer("live1") is None
        assert route.call_count == 1  # not retried

    @respx.mock
    @pytest.mark.asyncio()
    async def test_partial_trailer_path_returns_none(
        self, trailer: TrailerFallbackResolver
    ) -> None:
        doc = {
            "playabilityStatus": {
                "status": "LIVE_STREAM_OFFLINE",
                "errorScreen": {"ypcTrailerRenderer": {}},
            }
        }
        respx.post(_PLAYER_URL).respond(200, json=doc)

        assert await trailer.resolve_trailer("live1") is None

    @respx.mock
    @pytest.mark.asyncio()
    async def test_network_failure_is_silent(
        self, trailer: TrailerFallbackResolver, notifier: RecordingNotifier
    ) -> None:
        respx.post(_PLAYER_URL).mock(side_effect=httpx.ConnectError("refused"))

        assert await trailer.resolve_trailer("live1") is None
        assert notifier.notifications == []
