"""
Rich UI components for logging and demo output in pattern_catalog.
This module provides Rich-based alternatives to standard logging output.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from ..singleton.holder import GuardState


def is_rich_enabled() -> bool:
    """Check if Rich UI should be enabled based on environment"""
    return os.environ.get("PATTERNS_RICH_UI", "false").lower() in ("true", "1", "yes")


# Shared console for Rich log output
console = Console()


class RichLoggingFilter(logging.Filter):
    """Filter to suppress debug chatter when Rich UI is active"""

    def filter(self, record):
        # Thread-level construction traces are noisy next to the demo output
        if record.levelno <= logging.DEBUG:
            return False
        return True


def get_rich_handler() -> logging.Handler:
    """Get Rich logging handler writing to the shared console"""
    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
    )
    handler.addFilter(RichLoggingFilter())
    return handler


def get_status_color(status: str) -> str:
    """Get Rich color for a guard state"""
    color_map = {
        GuardState.READY.value: "green",
        GuardState.CONSTRUCTING.value: "yellow",
        GuardState.EMPTY.value: "dim",
    }
    return color_map.get(status.upper(), "white")


def format_status_text(status: str, message: str = "") -> str:
    """Format status text with Rich markup"""
    color = get_status_color(status)
    formatted_status = f"[{color}]{status}[/{color}]"
    return f"{formatted_status}: {message}" if message else formatted_status
