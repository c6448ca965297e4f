# veneer/registry/decorators.py
"""
Registry of decorator classes.

Two indexes are kept:

- an explicit map ``source class -> decorator class`` populated by
  ``veneer.register(...)``;
- a name index ``qualified name -> [decorator classes]`` filled as decorator
  classes are defined, used to find convention-named decorators that live
  outside the source's module.
"""

import logging
from threading import RLock
from typing import Any

from .base import BaseRegistry

logger = logging.getLogger(__name__)


def _identity(key: Any) -> Any:
    return key


class DecoratorRegistry(BaseRegistry[type, Any]):
    def __init__(self) -> None:
        super().__init__(coerce_key=_identity)
        self._names: dict[str, list[type]] = {}
        self._names_lock = RLock()

    def lookup(self, source_cls: type) -> type | None:
        """Return the decorator registered for ``source_cls`` or its nearest base class."""
        for klass in getattr(source_cls, "__mro__", (source_cls,)):
            found = self.try_get(klass)
            if found is not None:
                return found
        return None

    # --- name index ---

    def index(self, decorator_cls: type) -> None:
        """Record ``decorator_cls`` under its qualified name."""
        with self._names_lock:
            bucket = self._names.setdefault(decorator_cls.__qualname__, [])
            if decorator_cls not in bucket:
                bucket.append(decorator_cls)
        logger.debug("Indexed decorator %s.%s", decorator_cls.__module__, decorator_cls.__qualname__)

    def named(self, qualname: str) -> tuple[type, ...]:
        """Return every indexed decorator class with the given qualified name."""
        with self._names_lock:
            return tuple(self._names.get(qualname, ()))

    def forget(self, decorator_cls: type) -> None:
        """Drop ``decorator_cls`` from both indexes."""
        with self._names_lock:
            bucket = self._names.get(decorator_cls.__qualname__, [])
            if decorator_cls in bucket:
                bucket.remove(decorator_cls)
        with self._lock:
            for key, value in list(self._store.items()):
                if value is decorator_cls:
                    del self._store[key]
