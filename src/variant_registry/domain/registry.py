"""Strategy registry: late binding from a discriminator key to a variant factory."""

import logging
import threading
from collections.abc import Mapping
from types import MappingProxyType

from variant_registry.domain.errors import (
    CapabilityViolationError,
    DuplicateKeyError,
    FactoryConstructionError,
    UnknownKeyError,
)
from variant_registry.domain.protocols import Product, VariantFactory

logger = logging.getLogger(__name__)

_PRODUCT_OPERATIONS: tuple[str, ...] = ("get_name", "get_price")
_EMPTY_ARGS: Mapping[str, object] = MappingProxyType({})


class StrategyRegistry:
    """
    Maps discriminator keys to factories producing Product variants.

    Callers ask for a variant by key and never import the concrete class.
    A single re-entrant lock guards the mapping: writes are exclusive and
    reads never observe a half-registered entry. Factories run outside the
    lock, so a slow factory does not block other readers and may itself
    call back into the registry.
    """

    def __init__(self) -> None:
        self._factories: dict[str, VariantFactory] = {}
        self._lock = threading.RLock()

    def register(self, key: str, factory: VariantFactory, overwrite: bool = False) -> None:
        """
        Add a key -> factory mapping.

        Raises DuplicateKeyError if the key exists and overwrite is False; the
        existing mapping is left untouched in that case.
        """
        StrategyRegistry._check_key(key)
        if not callable(factory):
            raise TypeError(
                f"Factory for '{key}' must be callable, got {type(factory).__name__}")
        with self._lock:
            if key in self._factories:
                if not overwrite:
                    raise DuplicateKeyError(key)
                logger.warning("Overwriting factory for key '%s'", key)
            self._factories[key] = factory
        logger.debug("Registered factory for key '%s'", key)

    def unregister(self, key: str) -> None:
        """Remove a mapping. Raises UnknownKeyError if the key is absent."""
        with self._lock:
            if not isinstance(key, str) or key not in self._factories:
                raise UnknownKeyError(key, tuple(sorted(self._factories)))
            del self._factories[key]
        logger.debug("Unregistered factory for key '%s'", key)

    def create(self, key: str, construction_args: Mapping[str, object] | None = None) -> Product:
        """
        Build the variant registered under key.

        Arguments are passed to the factory as-is; validating them is the
        factory's job. Any factory failure is re-raised as
        FactoryConstructionError naming the key, with the original exception
        chained. The result must implement Product in full.
        """
        with self._lock:
            factory = self._factories.get(key) if isinstance(key, str) else None
            if factory is None:
                raise UnknownKeyError(key, tuple(sorted(self._factories)))

        args = _EMPTY_ARGS if construction_args is None else construction_args
        try:
            product = factory(args)
        except Exception as exc:
            raise FactoryConstructionError(key, exc) from exc

        missing = tuple(
            op for op in _PRODUCT_OPERATIONS
            if not callable(getattr(product, op, None))
        )
        if missing or not isinstance(product, Product):
            violation = CapabilityViolationError(
                product, missing or _PRODUCT_OPERATIONS)
            raise FactoryConstructionError(key, violation) from violation
        return product

    def has(self, key: str) -> bool:
        """Return True if key is registered."""
        with self._lock:
            return isinstance(key, str) and key in self._factories

    def keys(self) -> tuple[str, ...]:
        """Return a sorted snapshot of registered keys."""
        with self._lock:
            return tuple(sorted(self._factories))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._factories)

    @staticmethod
    def _check_key(key: object) -> None:
        if not isinstance(key, str) or not key.strip():
            raise ValueError(f"Registry key must be a non-empty string, got {key!r}")
