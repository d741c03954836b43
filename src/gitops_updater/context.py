"""Cancellation context passed through every call made for one update."""

from __future__ import annotations

import threading
import time
from typing import Optional

CANCELED = "context canceled"
DEADLINE_EXCEEDED = "context deadline exceeded"


class ContextCancelledError(RuntimeError):
    """Raised when work is attempted on a cancelled or expired context."""


class RequestContext:
    """
    Carries cancellation and an optional deadline for a single request.

    Collaborators call ``raise_if_cancelled`` before doing any remote work.
    Contexts are safe to share between threads; ``cancel`` may be called
    from any thread.
    """

    def __init__(self, deadline: Optional[float] = None) -> None:
        self._cancelled = threading.Event()
        self._deadline = deadline

    @classmethod
    def background(cls) -> RequestContext:
        """Return a context that is never cancelled unless ``cancel`` is called."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> RequestContext:
        """Return a context that expires ``seconds`` from now."""
        return cls(deadline=time.monotonic() + seconds)

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self.error() is not None

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or None without a deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def error(self) -> Optional[str]:
        """Return why the context is done, or None while it is still live."""
        if self._cancelled.is_set():
            return CANCELED
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return DEADLINE_EXCEEDED
        return None

    def raise_if_cancelled(self) -> None:
        reason = self.error()
        if reason is not None:
            raise ContextCancelledError(reason)
