"""Payload handed out by singleton providers."""

import secrets
import threading
from datetime import datetime, timezone

from pydantic import BaseModel, Field


def _token() -> str:
    return secrets.token_hex(4)


def _current_thread_name() -> str:
    return threading.current_thread().name


class SingletonInstance(BaseModel):
    """Opaque singleton payload.

    ``creation_number`` is the holder counter value at construction time.
    ``instance_id`` differs between constructions, which makes a lost race
    visible even after the last write wins.
    """

    label: str
    creation_number: int = Field(ge=1)
    instance_id: str = Field(default_factory=_token)
    thread_name: str = Field(default_factory=_current_thread_name)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def show_message(self, count: int | None = None) -> str:
        """Return the greeting line printed by the demonstrations.

        Args:
            count: Counter value to report. Defaults to this instance's
                creation number.
        """
        if count is None:
            count = self.creation_number
        return f"Hello from {self.label} Singleton! Count: {count}"
