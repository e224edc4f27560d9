"""Thread-based guard keeping network I/O off restricted threads."""

from __future__ import annotations

import threading

from thumbstrip.domain.entities.errors import RestrictedContextError


class ThreadContextGuard:
    """Implements ``ContextGuardPort`` for a set of restricted threads.

    A host with a UI thread registers it via :meth:`restrict`; any fetch
    issued from that thread fails with ``RestrictedContextError``.
    """

    def __init__(self, restricted: tuple[threading.Thread, ...] = ()) -> None:
        self._lock = threading.Lock()
        self._restricted: set[int] = set()
        for thread in restricted:
            self.restrict(thread)

    def restrict(self, thread: threading.Thread) -> None:
        if thread.ident is None:
            raise ValueError(f"Thread {thread.name!r} has not been started")
        with self._lock:
            self._restricted.add(thread.ident)

    def release(self, thread: threading.Thread) -> None:
        with self._lock:
            self._restricted.discard(thread.ident)

    def is_restricted(self) -> bool:
        with self._lock:
            return threading.get_ident() in self._restricted

    def verify_off_restricted_context(self) -> None:
        if self.is_restricted():
            raise RestrictedContextError(
                f"Network call on restricted thread {threading.current_thread().name!r}"
            )
