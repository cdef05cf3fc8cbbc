"""Cancellable stand-in for slow resource acquisition."""

import logging
import threading
import time
from typing import Optional

from ..exceptions import ConstructionCancelledError

log = logging.getLogger(__name__)


class CancellationToken:
    """Thread-safe cancellation flag shared between a caller and its waits."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: float) -> bool:
        """Block for up to ``timeout`` seconds; return True if cancelled meanwhile."""
        return self._event.wait(timeout)

    def cancel_after(self, seconds: float) -> threading.Timer:
        """Schedule cancellation on a daemon timer and return the timer."""
        timer = threading.Timer(seconds, self.cancel)
        timer.daemon = True
        timer.start()
        return timer


def simulate_slow_acquisition(
    delay: float, token: Optional[CancellationToken] = None
) -> None:
    """Wait ``delay`` seconds, aborting early if ``token`` is cancelled.

    Raises:
        ConstructionCancelledError: If the token was cancelled before or
            during the wait.
    """
    if delay <= 0:
        if token is not None and token.cancelled:
            raise ConstructionCancelledError(0.0)
        return

    if token is None:
        time.sleep(delay)
        return

    started = time.perf_counter()
    if token.wait(delay):
        elapsed = time.perf_counter() - started
        log.debug(f"Slow acquisition cancelled after {elapsed:.3f}s")
        raise ConstructionCancelledError(elapsed)
