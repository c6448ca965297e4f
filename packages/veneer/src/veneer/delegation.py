# veneer/delegation.py
"""Attribute delegation primitives shared by decorators and collection decorators."""

from typing import Any, Optional


def is_private(name: str) -> bool:
    """Names with a leading underscore are never delegated."""
    return name.startswith("_")


def defined_on(obj: Any, name: str, *, stop: Optional[type] = None) -> bool:
    """True if ``name`` resolves on ``obj`` without going through ``__getattr__``.

    With ``stop``, only classes below ``stop`` in the MRO count, and the
    instance dictionary is ignored.
    """
    if stop is None and name in getattr(obj, "__dict__", {}):
        return True
    for klass in type(obj).__mro__:
        if klass is stop:
            return False
        if name in klass.__dict__:
            return True
    return False


class Delegated:
    """Descriptor that forwards one attribute to another attribute of the instance.

        class ProductDecorator(Decorator):
            title = Delegated("title")
            currency = Delegated("code", to="price")
    """

    def __init__(self, name: str | None = None, to: str = "source") -> None:
        self.name = name
        self.to = to

    def __set_name__(self, owner: type, name: str) -> None:
        if self.name is None:
            self.name = name

    def __get__(self, obj: Any, objtype: Optional[type] = None) -> Any:
        if obj is None:
            return self
        return getattr(getattr(obj, self.to), self.name)

    def __set__(self, obj: Any, value: Any) -> None:
        setattr(getattr(obj, self.to), self.name, value)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"Delegated({self.name!r}, to={self.to!r})"
