# veneer/decoratable.py
"""
Decoratable capability for source objects.

Mixing :class:`Decoratable` into a model lets callers write
``product.decorate()`` instead of ``ProductDecorator.decorate(product)``, and
makes the model compare equal to decorators that wrap it.

    class Product(Decoratable, models.Model):
        ...

Plain objects that do not mix it in can still be decorated; inference then
goes through :func:`veneer.inference.infer_decorator_class` directly.
"""

from typing import Any

from .decorator import Decorator
from .inference import infer_decorator_class


class Decoratable:
    """Mixin granting ``decorate``, ``decorator_class`` and decoration-aware equality."""

    def decorate(self, **options: Any):
        """Decorate this object with its inferred :meth:`decorator_class`."""
        return self.decorator_class().decorate(self, **options)

    @classmethod
    def decorator_class(cls) -> type:
        """Infer the decorator class, e.g. ``Product`` -> ``ProductDecorator``.

        :raises UninferrableDecoratorError: if no decorator can be found.
        """
        return infer_decorator_class(cls)

    def applied_decorators(self) -> list[type]:
        return []

    def is_decorated_with(self, decorator_class: type) -> bool:
        return False

    def is_decorated(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is True:
            return True
        if isinstance(other, Decorator):
            return self == other.source
        return result

    def __hash__(self) -> int:
        return super().__hash__()
