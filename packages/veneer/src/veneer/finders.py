# veneer/finders.py
"""
Decorated finders.

After ``BookDecorator.decorates_finders()``, reading ``BookDecorator.objects``
returns ``Book.objects`` wrapped so that what its methods return comes back
decorated:

    BookDecorator.objects.get(pk=1)                # BookDecorator
    BookDecorator.objects.filter(published=True)   # BooksDecorator
    BookDecorator.objects.count()                  # 3, untouched

Finder functions work the same way (``BookDecorator.decorates_finders("find")``
makes ``BookDecorator.find(1)`` decorate the found book).
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .delegation import is_private

logger = logging.getLogger(__name__)

__all__ = ["DecoratedFinder"]


class DecoratedFinder:
    """Wraps a manager or finder callable of a decorator's source class.

    Results that are instances of the source class are decorated with the
    decorator class; other iterables (querysets, lists) become its collection
    decorator. ``None``, tuples, mappings and scalars pass through.
    """

    def __init__(self, decorator_cls: type, finder: Any) -> None:
        self._decorator_cls = decorator_cls
        self._finder = finder

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.decorate_result(self._finder(*args, **kwargs))

    def __getattr__(self, name: str) -> Any:
        if is_private(name):
            raise AttributeError(name)
        value = getattr(self._finder, name)
        if callable(value) and not isinstance(value, type):
            return DecoratedFinder(self._decorator_cls, value)
        return value

    def decorate_result(self, result: Any) -> Any:
        from .decorator import Decorator

        cls = self._decorator_cls
        if result is None or isinstance(result, (Decorator, tuple, str, bytes, Mapping)):
            return result
        if isinstance(result, cls.source_class()):
            return cls.decorate(result)
        if isinstance(result, Iterable):
            logger.debug("Decorating finder result of %s as a collection", cls.__qualname__)
            return cls.decorate_collection(result)
        return result

    def __repr__(self) -> str:
        return f"<DecoratedFinder {self._decorator_cls.__qualname__} for {self._finder!r}>"
