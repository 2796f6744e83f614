"""
Rule registry: maps rule names to factories.
Each Validator owns its own registry; default_registry() hands out a fresh
copy pre-populated with the built-in rules so host applications can add or
override rules without touching anyone else's.
"""
import threading
from typing import Callable, Iterator, Mapping, Optional

from validata.logging_config import get_logger
from validata.models import Evaluator
from validata.validators.rules import BUILTIN_RULES

logger = get_logger("validata.registry")

RuleFactory = Callable[..., Evaluator]


class RuleNotFound(KeyError, AttributeError):
    """Unknown rule name. Also an AttributeError so RuleBuilder honours getattr defaults."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No rule registered under name={self.name!r}"


class RuleRegistry:
    """
    Name -> factory mapping. Registration is serialized with a lock; lookups
    are plain dict reads, so register rules before validating concurrently.
    """

    def __init__(self, factories: Optional[Mapping[str, RuleFactory]] = None):
        self._factories: dict[str, RuleFactory] = dict(factories or {})
        self._lock = threading.Lock()

    def add(self, name: str, factory: RuleFactory) -> None:
        """Register a factory; an existing rule with the same name is replaced."""
        if not callable(factory):
            raise TypeError(f"Rule factory for {name!r} must be callable")
        with self._lock:
            overwrote = name in self._factories
            self._factories[name] = factory
        logger.debug("rule_registered", rule=name, overwrote=overwrote)

    def get(self, name: str) -> RuleFactory:
        try:
            return self._factories[name]
        except KeyError:
            logger.warning("rule_not_found", rule=name)
            raise RuleNotFound(name) from None

    def build(self, name: str, *args, **kwargs) -> Evaluator:
        """Look up `name` and call its factory with the rule configuration."""
        return self.get(name)(*args, **kwargs)

    def copy(self) -> "RuleRegistry":
        return RuleRegistry(self._factories)

    def names(self) -> list[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._factories))

    def __len__(self) -> int:
        return len(self._factories)


def default_registry() -> RuleRegistry:
    return RuleRegistry(BUILTIN_RULES)


class RuleBuilder:
    """
    Attribute-style rule construction bound to a registry:

        R = RuleBuilder(registry)
        rules = {"first_name": [R.required("Required"), R.max(10, "Max :max")]}

    Unknown names raise RuleNotFound when the attribute is accessed.
    """

    def __init__(self, registry: RuleRegistry):
        self._registry = registry

    def __getattr__(self, name: str) -> RuleFactory:
        if name.startswith("_"):
            raise AttributeError(name)
        return self._registry.get(name)

    def __dir__(self):
        return self._registry.names()
