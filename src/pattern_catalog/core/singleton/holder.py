from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class GuardState(str, Enum):
    """Lifecycle of a singleton slot."""

    EMPTY = "EMPTY"
    CONSTRUCTING = "CONSTRUCTING"
    READY = "READY"


class InstanceHolder(Generic[T]):
    """Slot for a singleton instance plus a creation counter.

    Nothing here is thread-safe. Guards decide who may call ``begin`` and
    ``publish``; the holder only records what happened.
    """

    def __init__(self):
        self.instance: Optional[T] = None
        self.state: GuardState = GuardState.EMPTY
        self.creation_count: int = 0

    def is_empty(self) -> bool:
        return self.instance is None

    def begin(self) -> int:
        """Mark construction as started and return the creation number it will get."""
        self.state = GuardState.CONSTRUCTING
        return self.creation_count + 1

    def publish(self, instance: T) -> None:
        """Store a fully built instance, then flip the state to READY.

        The instance is assigned before the state so that a reader who sees
        READY also sees the instance.
        """
        self.creation_count += 1
        self.instance = instance
        self.state = GuardState.READY

    def reset(self) -> None:
        """Undo ``begin`` after a failed or cancelled construction.

        Falls back to READY rather than EMPTY if a racing construction
        already published an instance.
        """
        self.state = GuardState.EMPTY if self.instance is None else GuardState.READY

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(state={self.state.value}, "
            f"creation_count={self.creation_count})"
        )
