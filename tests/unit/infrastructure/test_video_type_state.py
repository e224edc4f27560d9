"""Tests for the VideoTypeState cell and Event pub/sub primitive."""

from __future__ import annotations

import threading

from thumbstrip.domain.entities import VideoType
from thumbstrip.infrastructure.video_type import Event, VideoTypeState


class TestEvent:
    def test_subscribers_called_in_order(self) -> None:
        event: Event[int] = Event()
        seen: list[str] = []
        event.subscribe(lambda v: seen.append(f"a{v}"))
        event.subscribe(lambda v: seen.append(f"b{v}"))

        event(1)

        assert seen == ["a1", "b1"]

    def test_unsubscribe(self) -> None:
        event: Event[int] = Event()
        seen: list[int] = []
        unsubscribe = event.subscribe(seen.append)

        unsubscribe()
        unsubscribe()  # idempotent
        event(1)

        assert seen == []
        assert len(event) == 0

    def test_subscriber_may_unsubscribe_during_dispatch(self) -> None:
        event: Event[int] = Event()
        seen: list[int] = []
        unsubscribe_holder: list = []

        def once(value: int) -> None:
            seen.append(value)
            unsubscribe_holder[0]()

        unsubscribe_holder.append(event.subscribe(once))
        event(1)
        event(2)

        assert seen == [1]


class TestVideoTypeState:
    def test_initial_unknown(self) -> None:
        assert VideoTypeState().current is VideoType.MUSIC_VIDEO_TYPE_UNKNOWN

    def test_set_from_string_notifies(self) -> None:
        state = VideoTypeState()
        seen: list[VideoType] = []
        state.on_change.subscribe(seen.append)

        state.set_from_string("MUSIC_VIDEO_TYPE_OMV")

        assert state.current is VideoType.MUSIC_VIDEO_TYPE_OMV
        assert seen == [VideoType.MUSIC_VIDEO_TYPE_OMV]
        assert state.current.is_music_video() is True

    def test_unknown_name_ignored(self) -> None:
        state = VideoTypeState()
        seen: list[VideoType] = []
        state.on_change.subscribe(seen.append)

        state.set_from_string("NOT_A_TYPE")

        assert state.current is VideoType.MUSIC_VIDEO_TYPE_UNKNOWN
        assert seen == []

    def test_unchanged_value_does_not_notify(self) -> None:
        state = VideoTypeState()
        seen: list[VideoType] = []
        state.set_from_string("MUSIC_VIDEO_TYPE_ATV")
        state.on_change.subscribe(seen.append)

        state.set_from_string("MUSIC_VIDEO_TYPE_ATV")

        assert seen == []

    def test_compare_and_set(self) -> None:
        state = VideoTypeState()
        seen: list[VideoType] = []
        state.on_change.subscribe(seen.append)

        assert state.compare_and_set(
            VideoType.MUSIC_VIDEO_TYPE_OMV, VideoType.MUSIC_VIDEO_TYPE_UGC
        ) is False
        assert state.compare_and_set(
            VideoType.MUSIC_VIDEO_TYPE_UNKNOWN, VideoType.MUSIC_VIDEO_TYPE_UGC
        ) is True
        assert state.current is VideoType.MUSIC_VIDEO_TYPE_UGC
        assert seen == [VideoType.MUSIC_VIDEO_TYPE_UGC]

    def test_observer_reads_new_value(self) -> None:
        state = VideoTypeState()
        observed: list[VideoType] = []
        state.on_change.subscribe(lambda _: observed.append(state.current))

        state.set_from_string("MUSIC_VIDEO_TYPE_LIVE_STREAM")

        assert observed == [VideoType.MUSIC_VIDEO_TYPE_LIVE_STREAM]

    def test_concurrent_writers_settle_on_valid_value(self) -> None:
        state = VideoTypeState()
        names = [t.name for t in VideoType]
        threads = [
            threading.Thread(target=state.set_from_string, args=(name,))
            for name in names * 5
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert state.current in set(VideoType)
