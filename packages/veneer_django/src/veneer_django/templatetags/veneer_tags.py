# veneer_django/templatetags/veneer_tags.py
"""
Template filters for decorating objects inside templates.

Usage examples:
---------------
    {% load veneer_tags %}

    {% with product=product|decorate %}{{ product.display_price }}{% endwith %}

    {% for item in products|decorate_collection %}{{ item.display_price }}{% endfor %}

    {# explicit decorator class #}
    {% with product=product|decorate:"shop.decorators.SaleProductDecorator" %}...{% endwith %}
"""

from typing import Any, Optional

from django import template
from django.utils.module_loading import import_string

from veneer import CollectionDecorator, Decorator
from veneer.inference import infer_decorator_class

register = template.Library()


def _decorator_from(path: Optional[str]) -> Optional[type]:
    return import_string(path) if path else None


@register.filter(name="decorate")
def decorate_filter(value: Any, decorator: Optional[str] = None) -> Any:
    """Decorate a single object, with its inferred decorator unless a path is given."""
    if value is None:
        return None
    decorator_cls = _decorator_from(decorator)
    if decorator_cls is not None:
        return decorator_cls.decorate(value)
    if isinstance(value, (Decorator, CollectionDecorator)):
        return value
    decorate = getattr(value, "decorate", None)
    if callable(decorate):
        return decorate()
    return infer_decorator_class(type(value)).decorate(value)


@register.filter(name="decorate_collection")
def decorate_collection_filter(value: Any, decorator: Optional[str] = None) -> Any:
    """Decorate every item, inferring each item's decorator unless a path is given."""
    if value is None:
        return None
    decorator_cls = _decorator_from(decorator)
    if decorator_cls is not None:
        return decorator_cls.decorate_collection(value)
    return CollectionDecorator.decorate(value)
