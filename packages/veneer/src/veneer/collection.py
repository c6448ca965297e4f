# veneer/collection.py
"""
Collection decorators.

A :class:`CollectionDecorator` wraps an iterable of sources and behaves like
a read-only sequence of item decorators. Items are decorated lazily, the
first time the collection is read, and exactly once.

Item decorator resolution, in order:

1. ``with_=SomeDecorator`` passed at construction;
2. ``with_="infer"``: every item picks its own decorator;
3. the class default, :attr:`CollectionDecorator.item_decorator_class` or the
   decorator named after the collection (``ProductsDecorator`` ->
   ``ProductDecorator``);
4. per-item inference for the bare ``CollectionDecorator``.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, ClassVar

from .decorator import Decorator
from .delegation import is_private
from .exceptions import DecorationError, DelegationError
from .inference import infer_decorator_class, infer_item_decorator_class
from .options import INFER, CollectionOptions, validate_options

logger = logging.getLogger(__name__)

__all__ = ["CollectionDecorator"]

_MISSING = object()
_ELEMENT_COUNTS = (list.count, tuple.count, Sequence.count)


class CollectionDecorator(Sequence):
    """Sequence of decorated items backed by a sequence of sources."""

    #: Item decorator used when no ``with_`` is given; inferred from the name when None.
    item_decorator_class: ClassVar[type | None] = None

    def __init__(self, source: Iterable[Any], **options: Any) -> None:
        """
        :param source: Iterable of objects (or decorators) to decorate.
        :param with_: Item decorator class, or ``"infer"``.
        :param context: Passed to every item decorator.
        :raises ConfigurationError: On any other keyword option.
        """
        opts = validate_options(CollectionOptions, options, owner=type(self).__qualname__)
        self.source = source
        self._with = opts.with_
        self._context = opts.context if opts.given("context") else {}

    @classmethod
    def decorate(cls, source: Iterable[Any], **options: Any) -> "CollectionDecorator":
        return cls(source, **options)

    @classmethod
    def default_item_decorator(cls) -> type | None:
        if cls.item_decorator_class is not None:
            return cls.item_decorator_class
        if cls is CollectionDecorator:
            return None
        return infer_item_decorator_class(cls)

    @property
    def decorator_class(self) -> type | None:
        """The item decorator in use; None means each item is inferred."""
        if self._with == INFER:
            return None
        if self._with is not None:
            return self._with
        return self.default_item_decorator()

    # ---------------- context ----------------

    @property
    def context(self) -> Any:
        return self._context

    @context.setter
    def context(self, value: Any) -> None:
        self._context = value
        if "_decorated" in self.__dict__:
            for item in self.decorated_collection:
                item.context = value

    # ---------------- decoration ----------------

    @property
    def decorated_collection(self) -> list[Any]:
        """The decorated items, built on first access."""
        if "_decorated" in self.__dict__:
            return self.__dict__["_decorated"]
        try:
            decorated = [self.decorate_item(item) for item in self.source]
        except AttributeError as err:
            # Left as an AttributeError, __getattr__ would report a missing attribute instead.
            raise DecorationError(
                f"Decorating the items of {type(self).__qualname__} failed: {err}"
            ) from err
        self.__dict__["_decorated"] = decorated
        logger.debug("Decorated %d item(s) in %s", len(decorated), type(self).__qualname__)
        return decorated

    def decorate_item(self, item: Any) -> Any:
        decorator = self.decorator_class
        if decorator is not None:
            return decorator.decorate(item, context=self.context)
        if isinstance(item, Decorator):
            return type(item).decorate(item, context=self.context)
        decorate = getattr(item, "decorate", None)
        if callable(decorate):
            return decorate(context=self.context)
        return infer_decorator_class(type(item)).decorate(item, context=self.context)

    def is_decorated(self) -> bool:
        return True

    # ---------------- sequence protocol ----------------

    def __getitem__(self, index):
        return self.decorated_collection[index]

    def __len__(self) -> int:
        return len(self.decorated_collection)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.decorated_collection)

    def __contains__(self, item: object) -> bool:
        return item in self.decorated_collection

    def __bool__(self) -> bool:
        return bool(self.decorated_collection)

    def count(self, *value: Any) -> int:
        """
        ``count(x)`` counts decorated items equal to ``x``, like a list.

        Without an argument the source answers when it knows how to count
        itself (``QuerySet.count()`` runs a ``COUNT`` query and decorates
        nothing); plain lists and tuples fall back to ``len()``.
        """
        if value:
            return self.decorated_collection.count(*value)
        counter = getattr(type(self.source), "count", None)
        if not callable(counter) or counter in _ELEMENT_COUNTS:
            return len(self)
        return self.source.count()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if isinstance(other, CollectionDecorator):
            return self.decorated_collection == other.decorated_collection
        if isinstance(other, (str, bytes, Mapping)) or not isinstance(other, Iterable):
            return NotImplemented
        return self.decorated_collection == list(other)

    __hash__ = None  # type: ignore[assignment]

    # ---------------- delegation ----------------

    def __getattr__(self, name: str) -> Any:
        source = self.__dict__.get("source", _MISSING)
        if is_private(name) or source is _MISSING:
            raise DelegationError(f"{type(self).__qualname__!r} object has no attribute {name!r}")
        try:
            return getattr(source, name)
        except AttributeError:
            raise DelegationError(
                f"{type(self).__qualname__!r} object has no attribute {name!r}"
            ) from None

    def __repr__(self) -> str:
        decorator = self.decorator_class
        label = decorator.__qualname__ if decorator is not None else "inferred decorators"
        return f"<{type(self).__qualname__} of {label} for {self.source!r}>"
