"""InnerTube player routes and client personas.

Each persona posts a different client context to the same ``player``
route.  Body templates use ``%s`` placeholders for the video id; the TV
embedded client needs the id twice (embed URL + videoId).
"""

from __future__ import annotations

import json
from dataclasses import dataclass

_PLAYER_FIELDS = ",".join(
    (
        "storyboards.playerStoryboardSpecRenderer",
        "storyboards.playerLiveStoryboardSpecRenderer",
        "playabilityStatus.status",
        "playabilityStatus.errorScreen",
    )
)


@dataclass(frozen=True)
class PlayerRoute:
    """HTTP method + path (relative to the InnerTube base URL) + field mask."""

    method: str
    path: str
    fields: str = ""


GET_STORYBOARD_SPEC_RENDERER = PlayerRoute(
    method="POST", path="player", fields=_PLAYER_FIELDS
)

ANDROID_INNER_TUBE_BODY = (
    '{"context":{"client":{"clientName":"ANDROID","clientVersion":"18.38.44",'
    '"androidSdkVersion":34,"osName":"Android","osVersion":"14",'
    '"hl":"en","gl":"US"}},'
    '"contentCheckOk":true,"racyCheckOk":true,"videoId":"%s"}'
)

TV_EMBED_INNER_TUBE_BODY = (
    '{"context":{"client":{"clientName":"TVHTML5_SIMPLY_EMBEDDED_PLAYER",'
    '"clientVersion":"2.0","platform":"TV","clientScreen":"EMBED"},'
    '"thirdParty":{"embedUrl":"https://www.youtube.com/watch?v=%s"}},'
    '"contentCheckOk":true,"racyCheckOk":true,"videoId":"%s"}'
)

WEB_INNER_TUBE_BODY = (
    '{"context":{"client":{"clientName":"WEB","clientVersion":"2.20231101.05.00"}},'
    '"contentCheckOk":true,"racyCheckOk":true,"videoId":"%s"}'
)

_ANDROID_USER_AGENT = "com.google.android.youtube/18.38.44 (Linux; U; Android 14) gzip"
_TV_USER_AGENT = (
    "Mozilla/5.0 (PlayStation; PlayStation 4/12.00) "
    "AppleWebKit/605.1.15 (KHTML, like Gecko)"
)
_WEB_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/119.0 Safari/537.36"
)


@dataclass(frozen=True)
class ClientPersona:
    """One upstream client identity used to request the player response."""

    name: str
    body_template: str
    substitutions: int
    route: PlayerRoute
    surface_errors: bool
    user_agent: str

    def build_body(self, video_id: str) -> bytes:
        """Fill every placeholder with the (JSON-escaped) video id."""
        escaped = json.dumps(video_id)[1:-1]
        return (self.body_template % ((escaped,) * self.substitutions)).encode("utf-8")


ANDROID = ClientPersona(
    name="android",
    body_template=ANDROID_INNER_TUBE_BODY,
    substitutions=1,
    route=GET_STORYBOARD_SPEC_RENDERER,
    surface_errors=False,
    user_agent=_ANDROID_USER_AGENT,
)

TV_EMBEDDED = ClientPersona(
    name="tv_embedded",
    body_template=TV_EMBED_INNER_TUBE_BODY,
    substitutions=2,
    route=GET_STORYBOARD_SPEC_RENDERER,
    surface_errors=True,
    user_agent=_TV_USER_AGENT,
)

# Only used for premieres: the Android client returns the trailer player
# response in an encoded form, the web client returns it unserialized.
WEB = ClientPersona(
    name="web",
    body_template=WEB_INNER_TUBE_BODY,
    substitutions=1,
    route=GET_STORYBOARD_SPEC_RENDERER,
    surface_errors=False,
    user_agent=_WEB_USER_AGENT,
)

CHAIN_ORDER: tuple[ClientPersona, ...] = (ANDROID, TV_EMBEDDED)
