"""Port guarding against network I/O on restricted execution contexts."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ContextGuardPort(Protocol):
    def verify_off_restricted_context(self) -> None:
        """Raise ``RestrictedContextError`` when called on a restricted context."""
        ...
