"""Construction guards: who may build the singleton, and when.

Every guard runs the same EMPTY -> CONSTRUCTING -> READY state machine on an
``InstanceHolder``; they differ only in how much of it happens under a lock.
"""

import logging
import threading
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, ClassVar, Dict, Generic, Optional, Type, TypeVar

from ..exceptions import ProviderNotInitializedError
from .construction import CancellationToken, simulate_slow_acquisition
from .holder import GuardState, InstanceHolder

log = logging.getLogger(__name__)

T = TypeVar("T")

Factory = Callable[[int], T]


class Strategy(str, Enum):
    """Initialization-safety strategies."""

    UNSYNCHRONIZED = "unsynchronized"
    SYNCHRONIZED = "synchronized"
    DOUBLE_CHECKED = "double_checked"
    EAGER = "eager"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def thread_safe(self) -> bool:
        return self is not Strategy.UNSYNCHRONIZED


_LABELS = {
    Strategy.UNSYNCHRONIZED: "Non-Thread Safe",
    Strategy.SYNCHRONIZED: "Thread Safe",
    Strategy.DOUBLE_CHECKED: "Double-Checked Locking",
    Strategy.EAGER: "Eager",
}


class ConstructionGuard(ABC, Generic[T]):
    """Base class for singleton construction strategies.

    Args:
        factory: Builds the payload; receives the creation number.
        delay: Seconds of simulated slow acquisition before the factory runs.
    """

    strategy: ClassVar[Strategy]
    eager: ClassVar[bool] = False

    def __init__(self, factory: Factory, delay: float = 0.0):
        self.factory = factory
        self.delay = delay
        self.holder: InstanceHolder[T] = InstanceHolder()

    @property
    def state(self) -> GuardState:
        return self.holder.state

    @property
    def creation_count(self) -> int:
        return self.holder.creation_count

    def initialize(self, token: Optional[CancellationToken] = None) -> None:
        """Build ahead of first use. Lazy guards ignore this."""
        return None

    @abstractmethod
    def acquire(self, token: Optional[CancellationToken] = None) -> T:
        """Return the singleton, constructing it if this strategy allows."""

    def _construct(self, token: Optional[CancellationToken] = None) -> T:
        """Run one construction attempt through the state machine.

        On failure the holder goes back to EMPTY, the counter is untouched
        and the error propagates, so a later call can retry.
        """
        number = self.holder.begin()
        log.debug(
            f"{self.strategy.label}: constructing instance #{number} "
            f"on {threading.current_thread().name}"
        )
        try:
            simulate_slow_acquisition(self.delay, token)
            instance = self.factory(number)
        except Exception as e:
            self.holder.reset()
            log.warning(f"{self.strategy.label}: construction failed: {e}")
            raise

        self.holder.publish(instance)
        log.debug(
            f"{self.strategy.label}: published instance "
            f"(creation_count={self.holder.creation_count})"
        )
        return instance

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.holder!r})"


class UnsynchronizedGuard(ConstructionGuard[T]):
    """Check-then-act with no lock.

    Concurrent callers that all see an empty slot each construct; the last
    write wins and ``creation_count`` ends up above 1.
    """

    strategy = Strategy.UNSYNCHRONIZED

    def acquire(self, token: Optional[CancellationToken] = None) -> T:
        if self.holder.is_empty():
            self._construct(token)
        return self.holder.instance


class SynchronizedGuard(ConstructionGuard[T]):
    """The whole accessor runs under one lock, on every call."""

    strategy = Strategy.SYNCHRONIZED

    def __init__(self, factory: Factory, delay: float = 0.0):
        super().__init__(factory, delay)
        self._lock = threading.Lock()

    def acquire(self, token: Optional[CancellationToken] = None) -> T:
        with self._lock:
            if self.holder.is_empty():
                self._construct(token)
            return self.holder.instance


class DoubleCheckedGuard(ConstructionGuard[T]):
    """Lock only on the slow path.

    The fast path reads ``state`` without locking. ``InstanceHolder.publish``
    stores the instance before flipping the state to READY, and does so while
    the lock is held, so seeing READY implies seeing the finished instance.
    """

    strategy = Strategy.DOUBLE_CHECKED

    def __init__(self, factory: Factory, delay: float = 0.0):
        super().__init__(factory, delay)
        self._lock = threading.Lock()

    def acquire(self, token: Optional[CancellationToken] = None) -> T:
        if self.holder.state is GuardState.READY:
            return self.holder.instance

        with self._lock:
            # Check again inside the lock
            if self.holder.state is not GuardState.READY:
                self._construct(token)
            return self.holder.instance


class EagerGuard(ConstructionGuard[T]):
    """Constructed once by the composition root, before any caller runs.

    ``acquire`` never locks and never constructs; using it before
    ``initialize`` is a wiring error.
    """

    strategy = Strategy.EAGER
    eager = True

    def __init__(self, factory: Factory, delay: float = 0.0):
        super().__init__(factory, delay)
        self._init_lock = threading.Lock()

    def initialize(self, token: Optional[CancellationToken] = None) -> None:
        with self._init_lock:
            if self.holder.state is GuardState.READY:
                return
            self._construct(token)

    def acquire(self, token: Optional[CancellationToken] = None) -> T:
        if self.holder.state is not GuardState.READY:
            raise ProviderNotInitializedError(self.strategy.label)
        return self.holder.instance


_GUARDS: Dict[Strategy, Type[ConstructionGuard]] = {
    Strategy.UNSYNCHRONIZED: UnsynchronizedGuard,
    Strategy.SYNCHRONIZED: SynchronizedGuard,
    Strategy.DOUBLE_CHECKED: DoubleCheckedGuard,
    Strategy.EAGER: EagerGuard,
}


def create_guard(
    strategy: Strategy | str, factory: Factory, delay: float = 0.0
) -> ConstructionGuard:
    """Build the guard class registered for ``strategy``.

    Raises:
        ValueError: If ``strategy`` is not a known strategy name.
    """
    return _GUARDS[Strategy(strategy)](factory, delay)
