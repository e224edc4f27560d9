"""Port for user-facing failure notifications."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class NotificationPort(Protocol):
    """Fire-and-forget sink for user-visible messages (toasts etc.).

    Implementations MUST NOT block and MUST NOT raise.
    """

    def report(self, message: str, cause: BaseException | None = None) -> None:
        ...
