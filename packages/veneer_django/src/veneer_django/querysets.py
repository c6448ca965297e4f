# veneer_django/querysets.py
"""Querysets and managers that can decorate their results.

    class Product(Decoratable, models.Model):
        objects = DecoratableManager()

    Product.objects.filter(on_sale=True).decorate(context={"role": "staff"})
"""

from typing import Any

from django.db import models

from veneer.inference import infer_decorator_class


class DecoratableQuerySet(models.QuerySet):
    def decorator_class(self) -> type:
        """The decorator of the queryset's model."""
        hook = getattr(self.model, "decorator_class", None)
        if callable(hook):
            return hook()
        return infer_decorator_class(self.model)

    def decorate(self, **options: Any):
        """Decorate the queryset as a collection; evaluation stays lazy until first read."""
        return self.decorator_class().decorate_collection(self, **options)


class DecoratableManager(models.Manager.from_queryset(DecoratableQuerySet)):
    pass
