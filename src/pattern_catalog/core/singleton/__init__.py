from .construction import CancellationToken, simulate_slow_acquisition
from .driver import CallerObservation, DemoReport, run_concurrent_callers
from .guards import (
    ConstructionGuard,
    DoubleCheckedGuard,
    EagerGuard,
    Strategy,
    SynchronizedGuard,
    UnsynchronizedGuard,
    create_guard,
)
from .holder import GuardState, InstanceHolder
from .instance import SingletonInstance
from .provider import (
    SingletonProvider,
    SingletonRegistry,
    build_default_registry,
    instance_factory,
)

__all__ = [
    "CallerObservation",
    "CancellationToken",
    "ConstructionGuard",
    "DemoReport",
    "DoubleCheckedGuard",
    "EagerGuard",
    "GuardState",
    "InstanceHolder",
    "SingletonInstance",
    "SingletonProvider",
    "SingletonRegistry",
    "Strategy",
    "SynchronizedGuard",
    "UnsynchronizedGuard",
    "build_default_registry",
    "create_guard",
    "instance_factory",
    "run_concurrent_callers",
    "simulate_slow_acquisition",
]
