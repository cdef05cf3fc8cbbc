"""Registry of runnable pattern demonstrations."""

from functools import partial
from typing import Any, Callable, Dict, List

from ..core.exceptions import UnknownDemoError
from ..core.singleton import Strategy
from .behavioral import observer
from .creational import abstract_factory, builder, factory_method, singleton
from .structural import adapter, composite, decorator, facade

DEMOS: Dict[str, Callable[[], Any]] = {
    "abstract-factory": abstract_factory.main,
    "builder": builder.main,
    "factory-method": factory_method.main,
    "adapter": adapter.main,
    "composite": composite.main,
    "decorator": decorator.main,
    "facade": facade.main,
    "observer": observer.main,
    "singleton-basic": singleton.basic_main,
}
for strategy in Strategy:
    name = "singleton-" + strategy.value.replace("_", "-")
    DEMOS[name] = partial(singleton.main, strategy)


def list_demos() -> List[str]:
    return sorted(DEMOS)


def get_demo(name: str) -> Callable[[], Any]:
    try:
        return DEMOS[name]
    except KeyError:
        raise UnknownDemoError(
            f"Unknown demo '{name}'. Available: {', '.join(list_demos())}"
        ) from None


def run_demo(name: str) -> Any:
    return get_demo(name)()
