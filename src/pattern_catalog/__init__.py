# Load .env vars from file before everything else
from dotenv import load_dotenv

load_dotenv()

from .logger import setup_logging  # noqa: E402

setup_logging()

# TYPE_CHECKING imports provide full IDE support (autocomplete, type hints)
# while __getattr__ enables lazy loading at runtime for fast CLI startup
from typing import TYPE_CHECKING  # noqa: E402

if TYPE_CHECKING:
    from .core.singleton import (
        CancellationToken,
        SingletonProvider,
        SingletonRegistry,
        Strategy,
        build_default_registry,
        run_concurrent_callers,
    )


_SINGLETON_EXPORTS = (
    "CancellationToken",
    "SingletonProvider",
    "SingletonRegistry",
    "Strategy",
    "build_default_registry",
    "run_concurrent_callers",
)


def __getattr__(name):
    """Lazily import core modules only when accessed."""
    if name in _SINGLETON_EXPORTS:
        from .core import singleton

        return getattr(singleton, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_SINGLETON_EXPORTS)
