"""Concurrent-caller demonstration for singleton providers.

Starts a handful of threads that all call ``get_instance()`` at the same
moment and reports what each of them observed.
"""

import logging
import threading
import time
from typing import Any, Callable, List, Optional

from pydantic import BaseModel

from .construction import CancellationToken
from .guards import Strategy
from .provider import SingletonProvider

log = logging.getLogger(__name__)


class CallerObservation(BaseModel):
    """What one caller saw."""

    caller: int
    thread_name: str
    instance_id: Optional[str] = None
    observed_count: Optional[int] = None
    message: Optional[str] = None
    error: Optional[str] = None


class DemoReport(BaseModel):
    """Outcome of one concurrent run against a provider."""

    strategy: Strategy
    callers: int
    creation_count: int
    unique_instances: int
    elapsed: float
    observations: List[CallerObservation]

    @property
    def is_consistent(self) -> bool:
        return self.creation_count == 1 and self.unique_instances == 1

    @property
    def errors(self) -> List[str]:
        return [o.error for o in self.observations if o.error]


def _instance_id(instance: Any) -> str:
    return getattr(instance, "instance_id", None) or hex(id(instance))


def run_concurrent_callers(
    provider: SingletonProvider,
    callers: int = 3,
    emit: Callable[[str], None] = print,
    token: Optional[CancellationToken] = None,
) -> DemoReport:
    """Call ``provider.get_instance()`` from ``callers`` threads at once.

    Each successful caller emits the instance's greeting with the creation
    count it observed. Failures are logged and recorded on the caller's
    observation.

    Args:
        provider: Provider under test. Eager providers must be initialized.
        callers: Number of concurrent threads (at least 1).
        emit: Sink for the greeting lines.
        token: Optional cancellation token passed to every call.

    Returns:
        DemoReport with per-caller observations and the final counter.
    """
    if callers < 1:
        raise ValueError(f"callers must be at least 1, got {callers}")

    barrier = threading.Barrier(callers)
    emit_lock = threading.Lock()
    observations: List[Optional[CallerObservation]] = [None] * callers
    instances: List[Any] = [None] * callers

    def call(index: int) -> None:
        name = threading.current_thread().name
        barrier.wait()
        try:
            instance = provider.get_instance(token)
        except Exception as e:
            log.error(f"{name} failed to get {provider.name} instance: {e}")
            observations[index] = CallerObservation(
                caller=index, thread_name=name, error=str(e)
            )
            return

        count = provider.creation_count
        message = (
            instance.show_message(count)
            if hasattr(instance, "show_message")
            else f"{provider.strategy.label} instance {_instance_id(instance)}"
        )
        instances[index] = instance
        error = None
        try:
            with emit_lock:
                emit(message)
        except Exception as e:
            log.error(f"{name} failed to emit {provider.name} message: {e}")
            error = f"emit failed: {e}"

        observations[index] = CallerObservation(
            caller=index,
            thread_name=name,
            instance_id=_instance_id(instance),
            observed_count=count,
            message=message,
            error=error,
        )

    threads = [
        threading.Thread(target=call, args=(i,), name=f"caller-{i + 1}")
        for i in range(callers)
    ]

    started = time.perf_counter()
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    elapsed = time.perf_counter() - started

    unique = {id(instance) for instance in instances if instance is not None}
    report = DemoReport(
        strategy=provider.strategy,
        callers=callers,
        creation_count=provider.creation_count,
        unique_instances=len(unique),
        elapsed=elapsed,
        observations=[o for o in observations if o is not None],
    )
    log.debug(
        f"{provider.name}: {callers} callers, creation_count={report.creation_count}, "
        f"unique={report.unique_instances}, elapsed={elapsed:.3f}s"
    )
    return report
