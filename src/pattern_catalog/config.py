"""Centralized configuration for singleton demonstrations."""

import os
from dataclasses import dataclass
from typing import Optional

from .core.exceptions import InvalidConfigError
from .core.singleton.guards import Strategy

# Simulated slow resource acquisition
DEFAULT_CONSTRUCTION_DELAY = 0.1  # seconds
DEFAULT_CALLERS = 3
DEFAULT_STRATEGY = Strategy.DOUBLE_CHECKED


@dataclass
class DemoConfig:
    """Configuration for the concurrent-caller demonstrations."""

    construction_delay: float = DEFAULT_CONSTRUCTION_DELAY
    callers: int = DEFAULT_CALLERS
    strategy: Strategy = DEFAULT_STRATEGY

    @classmethod
    def from_env(cls) -> "DemoConfig":
        """Load configuration from environment variables.

        Environment variables:
        - PATTERNS_CONSTRUCTION_DELAY: Seconds spent constructing (default: 0.1)
        - PATTERNS_CALLERS: Number of concurrent callers (default: 3)
        - PATTERNS_STRATEGY: Default strategy (default: double_checked)

        Returns:
            DemoConfig initialized from environment variables.

        Raises:
            InvalidConfigError: If the delay is negative or the caller count
                is below 1, or either is not a number.
        """
        strategy_str = os.getenv("PATTERNS_STRATEGY", DEFAULT_STRATEGY.value).lower()
        try:
            strategy = Strategy(strategy_str)
        except ValueError:
            strategy = DEFAULT_STRATEGY

        delay = os.getenv(
            "PATTERNS_CONSTRUCTION_DELAY", str(DEFAULT_CONSTRUCTION_DELAY)
        )
        callers = os.getenv("PATTERNS_CALLERS", str(DEFAULT_CALLERS))

        return cls(
            construction_delay=_parse_env(
                "PATTERNS_CONSTRUCTION_DELAY", delay, float, 0, "a number >= 0"
            ),
            callers=_parse_env("PATTERNS_CALLERS", callers, int, 1, "an integer >= 1"),
            strategy=strategy,
        )


def _parse_env(variable: str, raw: str, kind: type, minimum: float, expected: str):
    try:
        value = kind(raw)
    except ValueError:
        raise InvalidConfigError(variable, raw, expected) from None
    if value < minimum:
        raise InvalidConfigError(variable, raw, expected)
    return value


# Global default configuration
_config: Optional[DemoConfig] = None


def get_demo_config() -> DemoConfig:
    """Get global demo configuration (lazy-loaded).

    Returns:
        DemoConfig instance initialized from environment.
    """
    global _config
    if _config is None:
        _config = DemoConfig.from_env()
    return _config


def set_demo_config(config: Optional[DemoConfig]) -> None:
    """Set global demo configuration (for testing).

    Args:
        config: DemoConfig to set as global, or None to reload from env.
    """
    global _config
    _config = config
