# veneer/association.py
"""
Decorated associations.

``Decorator.decorates_association("reviews")`` (or a ``DecoratesAssociation()``
class attribute) replaces the ``reviews`` attribute of a decorator with an
accessor that reads ``source.reviews``, decorates the result with the owner's
context, and caches it on the decorator instance:

    class ProductDecorator(Decorator):
        reviews = DecoratesAssociation(scope="published", context=lambda ctx: {**ctx, "compact": True})
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from .collection import CollectionDecorator
from .decorator import Decorator
from .inference import infer_decorator_class
from .options import INFER, AssociationOptions, validate_options

logger = logging.getLogger(__name__)

__all__ = ["DecoratedAssociation", "DecoratesAssociation"]

_UNREALIZED = object()


def _is_collection(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, Mapping, Decorator))


def _is_manager(value: Any) -> bool:
    # Django related managers and similar are not iterable but expose all().
    return not isinstance(value, Iterable) and callable(getattr(value, "all", None))


class DecoratedAssociation:
    """Lazily decorates one association of an owning decorator's source."""

    def __init__(self, owner: Decorator, association: str, **options: Any) -> None:
        self.options = validate_options(AssociationOptions, options, owner=type(self).__qualname__)
        self.owner = owner
        self.association = association
        self._decorated: Any = _UNREALIZED

    @property
    def context(self) -> Any:
        """The context passed to the association's decorators.

        A callable ``context`` option derives it from the owner's context, a
        plain value replaces it, and no option inherits it unchanged.
        """
        if not self.options.given("context"):
            return self.owner.context
        context = self.options.context
        if callable(context):
            return context(self.owner.context)
        return context

    @property
    def realized(self) -> bool:
        return self._decorated is not _UNREALIZED

    def __call__(self) -> Any:
        if self._decorated is _UNREALIZED:
            self._decorated = self.decorate(self.associated())
            logger.debug(
                "Realized association %s on %s", self.association, type(self.owner).__qualname__
            )
        return self._decorated

    def associated(self) -> Any:
        """Read the raw association off the owner's source and apply the scope."""
        value = getattr(self.owner.source, self.association)
        if _is_manager(value):
            value = value.all()
        scope = self.options.scope
        if scope is None or value is None:
            return value
        if callable(scope):
            return scope(value)
        return getattr(value, scope)()

    def decorate(self, associated: Any) -> Any:
        if associated is None:
            return None

        options = {"context": self.context}
        decorator = self.options.with_

        if decorator is None:
            return self._decorate_inferred(associated, options)
        if decorator == INFER:
            if _is_collection(associated):
                return CollectionDecorator.decorate(associated, with_=INFER, **options)
            return self._decorate_inferred(associated, options)
        if _is_collection(associated) and not issubclass(decorator, CollectionDecorator):
            return decorator.decorate_collection(associated, **options)
        return decorator.decorate(associated, **options)

    def _decorate_inferred(self, associated: Any, options: dict[str, Any]) -> Any:
        hook = getattr(associated, "decorator_class", None)

        if not _is_collection(associated):
            decorator = hook() if callable(hook) else infer_decorator_class(type(associated))
            return decorator.decorate(associated, **options)

        if callable(hook):
            decorator = hook()
            if issubclass(decorator, CollectionDecorator):
                return decorator.decorate(associated, **options)
            return decorator.decorate_collection(associated, **options)
        return CollectionDecorator.decorate(associated, **options)


class DecoratesAssociation:
    """Descriptor declaring a decorated association on a decorator class.

    The :class:`DecoratedAssociation` is built on first access and memoized
    per decorator instance.
    """

    def __init__(self, **options: Any) -> None:
        validate_options(AssociationOptions, options, owner="decorates_association")
        self.options = options
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Optional[Decorator], owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        cache = instance.__dict__.setdefault("_decorated_associations", {})
        association = cache.get(self.name)
        if association is None:
            association = DecoratedAssociation(instance, self.name, **self.options)
            cache[self.name] = association
        return association()
