"""
Cooperative cancellation for long-running solves.

Strategies poll a token from their main loops. A token trips either when
`cancel()` is called from another thread or when its deadline passes.
"""

from __future__ import annotations

import threading
import time

from .errors import SolveCancelledError, SolveTimeoutError


class CancellationToken:
    """Shared flag plus optional deadline checked by solver loops."""

    def __init__(self, timeout_seconds: float | None = None):
        self._event = threading.Event()
        self.timeout_seconds = timeout_seconds
        self._deadline = (
            time.monotonic() + timeout_seconds if timeout_seconds is not None else None
        )

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    def raise_if_cancelled(self, strategy: str) -> None:
        if self._event.is_set():
            raise SolveCancelledError(strategy)
        if self.expired:
            raise SolveTimeoutError(strategy, self.timeout_seconds)


class _NeverCancelled(CancellationToken):
    def cancel(self) -> None:
        raise RuntimeError("The default token cannot be cancelled")

    def raise_if_cancelled(self, strategy: str) -> None:
        return None


NEVER_CANCELLED = _NeverCancelled()


def resolve_token(token: CancellationToken | None) -> CancellationToken:
    return NEVER_CANCELLED if token is None else token
