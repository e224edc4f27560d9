"""Player response fetcher: one POST per call, failures returned as values."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

import httpx
import structlog

from thumbstrip.domain.ports.context_guard import ContextGuardPort
from thumbstrip.domain.ports.notification import NotificationPort
from thumbstrip.infrastructure.innertube.routes import PlayerRoute

log = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://youtubei.googleapis.com/youtubei/v1/"

ClientFactory = Callable[[], httpx.AsyncClient]


class FetchFailureKind(Enum):
    NETWORK = "network"  # timeout / IO
    BAD_STATUS = "bad_status"  # non-200
    MALFORMED = "malformed"  # body is not a JSON object
    INTERNAL = "internal"  # unexpected fault


@dataclass(frozen=True)
class FetchFailure:
    kind: FetchFailureKind
    message: str
    status_code: int | None = None


@dataclass(frozen=True)
class FetchResult:
    """Parsed player response or the classified reason there is none."""

    document: dict[str, Any] | None = None
    failure: FetchFailure | None = None

    @property
    def ok(self) -> bool:
        return self.document is not None

    @classmethod
    def success(cls, document: dict[str, Any]) -> FetchResult:
        return cls(document=document)

    @classmethod
    def failed(
        cls, kind: FetchFailureKind, message: str, status_code: int | None = None
    ) -> FetchResult:
        return cls(failure=FetchFailure(kind, message, status_code))


def build_client_factory(
    *, timeout_seconds: float = 10.0, user_agent: str | None = None
) -> ClientFactory:
    """Return a factory producing a fresh, unpooled client per request."""

    def factory() -> httpx.AsyncClient:
        headers = {"User-Agent": user_agent} if user_agent else None
        return httpx.AsyncClient(
            timeout=httpx.Timeout(timeout_seconds),
            headers=headers,
        )

    return factory


class PlayerResponseFetcher:
    """Posts a prebuilt InnerTube body to a player route.

    Every failure is absorbed and returned as a :class:`FetchResult`;
    only guard violations and cancellation propagate.
    """

    def __init__(
        self,
        *,
        client_factory: ClientFactory,
        notifier: NotificationPort,
        guard: ContextGuardPort,
        base_url: str = DEFAULT_BASE_URL,
        api_key: str | None = None,
    ) -> None:
        self._client_factory = client_factory
        self._notifier = notifier
        self._guard = guard
        self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._api_key = api_key

    def _url(self, route: PlayerRoute) -> str:
        return f"{self._base_url}{route.path}"

    def _params(self, route: PlayerRoute) -> dict[str, str]:
        params = {"prettyPrint": "false"}
        if route.fields:
            params["fields"] = route.fields
        if self._api_key:
            params["key"] = self._api_key
        return params

    def _handle_connection_error(
        self,
        message: str,
        exc: BaseException | None,
        *,
        surface_errors: bool,
    ) -> None:
        log.info(
            "storyboard_connection_error",
            message=message,
            error=str(exc) if exc else None,
        )
        if surface_errors:
            self._notifier.report(message, exc)

    async def fetch(
        self,
        route: PlayerRoute,
        body: bytes,
        *,
        surface_errors: bool,
        user_agent: str | None = None,
    ) -> FetchResult:
        """POST *body* to *route* and return the parsed JSON object."""
        self._guard.verify_off_restricted_context()

        start_ns = time.perf_counter_ns()
        try:
            headers = {"Content-Type": "application/json"}
            if user_agent:
                headers["User-Agent"] = user_agent

            async with self._client_factory() as client:
                resp = await client.request(
                    route.method,
                    self._url(route),
                    params=self._params(route),
                    content=body,
                    headers=headers,
                )

                if resp.status_code != 200:
                    # Always reported: a non-200 means something upstream is broken.
                    message = f"Storyboard not available: {resp.status_code}"
                    log.info(
                        "storyboard_bad_status",
                        status=resp.status_code,
                        route=route.path,
                    )
                    self._notifier.report(message)
                    return FetchResult.failed(
                        FetchFailureKind.BAD_STATUS, message, resp.status_code
                    )

                try:
                    document = resp.json()
                except ValueError as exc:
                    log.warning(
                        "storyboard_response_malformed",
                        route=route.path,
                        error=str(exc),
                    )
                    return FetchResult.failed(FetchFailureKind.MALFORMED, str(exc))

            if not isinstance(document, dict):
                log.warning(
                    "storyboard_response_malformed",
                    route=route.path,
                    error=f"top-level {type(document).__name__}",
                )
                return FetchResult.failed(
                    FetchFailureKind.MALFORMED, "Player response is not a JSON object"
                )
            return FetchResult.success(document)
        except httpx.TimeoutException as exc:
            message = "Storyboard temporarily not available (API timed out)"
            self._handle_connection_error(message, exc, surface_errors=surface_errors)
            return FetchResult.failed(FetchFailureKind.NETWORK, message)
        except httpx.HTTPError as exc:
            message = f"Storyboard temporarily not available: {exc}"
            self._handle_connection_error(message, exc, surface_errors=surface_errors)
            return FetchResult.failed(FetchFailureKind.NETWORK, message)
        except Exception as exc:  # noqa: BLE001
            log.exception("storyboard_fetch_failed", route=route.path)
            return FetchResult.failed(FetchFailureKind.INTERNAL, repr(exc))
        finally:
            duration_ms = round((time.perf_counter_ns() - start_ns) / 1_000_000, 1)
            log.debug("storyboard_fetch_timing", route=route.path, duration_ms=duration_ms)
