"""Notification sink adapters."""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

log = structlog.get_logger(__name__)


class LogNotifier:
    """Routes user-facing messages into the log stream.

    Implements ``NotificationPort``.  Hosts with a real UI (toasts,
    status bars) provide their own port implementation.
    """

    def __init__(self, *, enabled: bool = True) -> None:
        self._enabled = enabled

    def report(self, message: str, cause: BaseException | None = None) -> None:
        if not self._enabled:
            return
        log.warning(
            "user_notification",
            message=message,
            cause=repr(cause) if cause is not None else None,
        )


@dataclass
class RecordedNotification:
    message: str
    cause: BaseException | None = None


@dataclass
class RecordingNotifier:
    """Keeps reported messages in memory, e.g. for a host to drain later."""

    notifications: list[RecordedNotification] = field(default_factory=list)

    def report(self, message: str, cause: BaseException | None = None) -> None:
        self.notifications.append(RecordedNotification(message, cause))

    @property
    def messages(self) -> list[str]:
        return [n.message for n in self.notifications]

    def clear(self) -> None:
        self.notifications.clear()
