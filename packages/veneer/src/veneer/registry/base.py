# veneer/registry/base.py


import logging
from collections.abc import Callable, Iterator
from threading import RLock
from typing import Any, Generic, TypeVar

from .exceptions import RegistryCollisionError, RegistryFrozenError, RegistryLookupError

logger = logging.getLogger(__name__)

K = TypeVar("K")
T = TypeVar("T")


class BaseRegistry(Generic[K, T]):
    """Thread-safe registry mapping coerced keys to classes of T."""

    def __init__(self, *, coerce_key: Callable[[Any], K]) -> None:
        self._coerce = coerce_key
        self._lock = RLock()
        self._store: dict[K, type[T]] = {}
        self._frozen = False

    # --- registration ---

    def register(self, key: Any, cls: type[T], *, replace: bool = False) -> None:
        """
        Register ``cls`` under ``key``.

        Registering the same class twice is a no-op. Registering a different
        class under an existing key raises :class:`RegistryCollisionError`
        unless ``replace`` is set.

        :param key: The key, coerced with the registry's ``coerce_key``.
        :param cls: The class to store.
        :param replace: Overwrite an existing, different registration.
        :raises RegistryFrozenError: If the registry has been frozen.
        """
        k = self._coerce(key)
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError("Registry is frozen")
            existing = self._store.get(k)
            if existing is cls:
                logger.debug("Duplicate registration ignored: %s -> %s", k, cls)
                return
            if existing is not None and not replace:
                raise RegistryCollisionError(
                    f"Key already registered to a different class: {k!r} -> {existing!r}"
                )
            self._store[k] = cls

    # --- retrieval ---

    def get(self, key: Any) -> type[T]:
        """
        Retrieve the class registered under ``key``.

        :raises RegistryLookupError: If nothing is registered under the key.
        """
        k = self._coerce(key)
        with self._lock:
            try:
                return self._store[k]
            except KeyError as err:
                raise RegistryLookupError(f"Nothing registered for {key!r}") from err

    def try_get(self, key: Any) -> type[T] | None:
        """Like :meth:`get` but returns None on a miss."""
        try:
            return self.get(key)
        except RegistryLookupError:
            return None

    def count(self) -> int:
        with self._lock:
            return len(self._store)

    def items(self) -> tuple[tuple[K, type[T]], ...]:
        with self._lock:
            return tuple(self._store.items())

    def __contains__(self, key: Any) -> bool:
        with self._lock:
            return self._coerce(key) in self._store

    def __iter__(self) -> Iterator[tuple[K, type[T]]]:
        """Iterate over a snapshot of ``(key, class)`` pairs."""
        return iter(self.items())

    # --- mutation / control ---

    def unregister(self, key: Any) -> None:
        k = self._coerce(key)
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError("Registry is frozen")
            self._store.pop(k, None)

    def clear(self) -> None:
        """Clear the registry if not frozen."""
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError("Registry is frozen")
            self._store.clear()

    def freeze(self) -> None:
        """Mark the registry as frozen (no further mutations)."""
        with self._lock:
            self._frozen = True
