import logging
import threading
from typing import Dict, Generic, List, Optional, TypeVar

from ..exceptions import ProviderAlreadyRegisteredError, ProviderNotFoundError
from .construction import CancellationToken
from .guards import ConstructionGuard, Factory, Strategy, create_guard
from .holder import GuardState
from .instance import SingletonInstance

log = logging.getLogger(__name__)

T = TypeVar("T")


class SingletonProvider(Generic[T]):
    """Accessor for one logical singleton.

    Providers are ordinary objects: the composition root creates them and
    passes them to callers, instead of every caller reaching for a static
    slot. How construction is guarded is delegated to ``guard``.
    """

    def __init__(self, guard: ConstructionGuard, name: Optional[str] = None):
        self.guard = guard
        self.name = name or guard.strategy.value

    @classmethod
    def create(
        cls,
        strategy: Strategy | str,
        factory: Factory,
        delay: float = 0.0,
        name: Optional[str] = None,
    ) -> "SingletonProvider":
        return cls(create_guard(strategy, factory, delay), name=name)

    @property
    def strategy(self) -> Strategy:
        return self.guard.strategy

    @property
    def state(self) -> GuardState:
        return self.guard.state

    @property
    def creation_count(self) -> int:
        return self.guard.creation_count

    @property
    def is_ready(self) -> bool:
        return self.guard.state is GuardState.READY

    def initialize(self, token: Optional[CancellationToken] = None) -> None:
        """Construct now if the strategy is eager; no-op otherwise."""
        if self.guard.eager:
            log.debug(f"Initializing eager provider '{self.name}'")
            self.guard.initialize(token)

    def get_instance(self, token: Optional[CancellationToken] = None) -> T:
        """Return the singleton, constructing it on first use where allowed.

        Args:
            token: Optional cancellation token for the simulated slow
                construction. Cancelling leaves the provider EMPTY.

        Raises:
            ProviderNotInitializedError: Eager provider used before initialize().
            ConstructionCancelledError: The construction wait was cancelled.
        """
        return self.guard.acquire(token)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self.name!r}, "
            f"strategy={self.strategy.value}, state={self.state.value}, "
            f"creation_count={self.creation_count})"
        )


class SingletonRegistry:
    """Lifetime-scoped set of providers owned by the composition root."""

    def __init__(self):
        self._providers: Dict[str, SingletonProvider] = {}
        self._lock = threading.Lock()
        self._initialized = False

    def register(self, name: str, provider: SingletonProvider) -> SingletonProvider:
        with self._lock:
            if name in self._providers:
                raise ProviderAlreadyRegisteredError(
                    f"A provider is already registered under '{name}'"
                )
            self._providers[name] = provider
        return provider

    def get(self, name: str) -> SingletonProvider:
        try:
            return self._providers[name]
        except KeyError:
            raise ProviderNotFoundError(name, self.names()) from None

    def names(self) -> List[str]:
        return list(self._providers)

    def initialize_all(self, token: Optional[CancellationToken] = None) -> None:
        """Run eager construction for every registered provider, once."""
        with self._lock:
            providers = list(self._providers.values())
            for provider in providers:
                provider.initialize(token)
            self._initialized = True
        log.debug(f"Initialized {len(providers)} providers")

    @property
    def initialized(self) -> bool:
        return self._initialized

    def __contains__(self, name: str) -> bool:
        return name in self._providers

    def __iter__(self):
        return iter(self._providers.values())

    def __len__(self) -> int:
        return len(self._providers)


def instance_factory(strategy: Strategy) -> Factory:
    """Factory producing ``SingletonInstance`` payloads labelled by strategy."""

    def build(creation_number: int) -> SingletonInstance:
        return SingletonInstance(label=strategy.label, creation_number=creation_number)

    return build


def build_default_registry(delay: float = 0.0) -> SingletonRegistry:
    """Register one provider per strategy, keyed by the strategy value.

    Eager providers are not initialized here; call ``initialize_all()``.
    """
    registry = SingletonRegistry()
    for strategy in Strategy:
        registry.register(
            strategy.value,
            SingletonProvider.create(strategy, instance_factory(strategy), delay),
        )
    return registry
