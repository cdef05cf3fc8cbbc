"""Singleton: the four construction strategies raced by concurrent callers."""

import logging
from typing import Callable, List, Optional

from ...config import get_demo_config
from ...core.singleton import (
    CancellationToken,
    DemoReport,
    SingletonProvider,
    SingletonRegistry,
    Strategy,
    instance_factory,
    run_concurrent_callers,
)

log = logging.getLogger(__name__)


def build_registry(strategy: Strategy, delay: float = 0.0) -> SingletonRegistry:
    """Registry holding only the provider for ``strategy``."""
    registry = SingletonRegistry()
    registry.register(
        strategy.value,
        SingletonProvider.create(strategy, instance_factory(strategy), delay),
    )
    return registry


def run_singleton_demo(
    strategy: Strategy | str,
    callers: Optional[int] = None,
    delay: Optional[float] = None,
    cancel_after: Optional[float] = None,
    emit: Callable[[str], None] = print,
) -> DemoReport:
    """Composition root for one singleton demonstration.

    Builds a fresh registry for the chosen strategy, runs eager
    initialization before any caller exists, then races ``callers`` threads
    against the provider. Unset arguments come from ``DemoConfig``.
    """
    strategy = Strategy(strategy)
    if callers is None or delay is None:
        config = get_demo_config()
        callers = config.callers if callers is None else callers
        delay = config.construction_delay if delay is None else delay

    registry = build_registry(strategy, delay=delay)
    registry.initialize_all()

    token = None
    timer = None
    if cancel_after is not None:
        token = CancellationToken()
        timer = token.cancel_after(cancel_after)

    try:
        return run_concurrent_callers(
            registry.get(strategy.value), callers=callers, emit=emit, token=token
        )
    finally:
        if timer is not None:
            timer.cancel()


def run_basic_demo(emit: Callable[[str], None] = print) -> List[str]:
    """Two sequential lookups on a lazy provider share one instance."""
    provider = SingletonProvider.create(
        Strategy.UNSYNCHRONIZED,
        instance_factory(Strategy.UNSYNCHRONIZED),
        name="basic",
    )
    lines = []
    for _ in range(2):
        provider.get_instance()
        line = f"Hello from Singleton! {provider.creation_count}"
        emit(line)
        lines.append(line)
    return lines


def main(strategy: Strategy | str = Strategy.DOUBLE_CHECKED) -> DemoReport:
    return run_singleton_demo(strategy)


def basic_main() -> List[str]:
    return run_basic_demo()
