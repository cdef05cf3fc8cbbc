"""
Test configuration and fixtures for pattern-catalog tests.

Provides shared fixtures for:
- Payload factories with call recording and injectable failures
- Fresh provider registries
- Demo configuration reset
- Environment variable management
"""

import threading
from typing import Dict, List

import pytest

from pattern_catalog.config import set_demo_config
from pattern_catalog.core.singleton import (
    SingletonInstance,
    SingletonRegistry,
    build_default_registry,
)


class RecordingFactory:
    """Payload factory that records calls and can fail on demand.

    ``fail_times`` makes the first N calls raise RuntimeError.
    """

    def __init__(self, label: str = "Test", fail_times: int = 0):
        self.label = label
        self.fail_times = fail_times
        self.calls: List[int] = []
        self._lock = threading.Lock()

    def __call__(self, creation_number: int) -> SingletonInstance:
        with self._lock:
            self.calls.append(creation_number)
            if self.fail_times > 0:
                self.fail_times -= 1
                raise RuntimeError("simulated construction failure")
        return SingletonInstance(label=self.label, creation_number=creation_number)


@pytest.fixture
def recording_factory() -> RecordingFactory:
    """Provide a fresh recording payload factory."""
    return RecordingFactory()


@pytest.fixture
def failing_factory() -> RecordingFactory:
    """Provide a factory whose first call fails."""
    return RecordingFactory(fail_times=1)


@pytest.fixture
def registry() -> SingletonRegistry:
    """Provide a default registry with no construction delay, eagerly initialized."""
    registry = build_default_registry(delay=0.0)
    registry.initialize_all()
    return registry


@pytest.fixture(autouse=True)
def reset_demo_config():
    """Reset the lazily loaded demo configuration between tests.

    This fixture runs automatically so environment changes made with
    monkeypatch are picked up by the next get_demo_config() call.
    """
    set_demo_config(None)
    yield
    set_demo_config(None)


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> Dict[str, str]:
    """Provide patched environment variables for tests.

    Returns:
        Dictionary of environment variables set.
    """
    env_vars = {
        "PATTERNS_CONSTRUCTION_DELAY": "0.01",
        "PATTERNS_CALLERS": "4",
        "PATTERNS_STRATEGY": "synchronized",
        "LOG_LEVEL": "ERROR",  # Suppress logs during tests
    }

    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)

    return env_vars
