# veneer/serialization.py
"""
Plain-dict serialization of source objects.

:func:`to_dict` is a single-dispatch function; integrations register
serializers for their own model types (``veneer_django`` registers Django
models). The fallback handles pydantic models, dataclasses, mappings and
plain objects with a ``__dict__``.
"""

import dataclasses
from collections.abc import Mapping
from functools import singledispatch
from typing import Any

from pydantic import BaseModel

__all__ = ["to_dict"]


@singledispatch
def to_dict(obj: Any) -> dict[str, Any]:
    serializer = getattr(obj, "serializable_dict", None)
    if callable(serializer):
        return dict(serializer())
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    try:
        attrs = vars(obj)
    except TypeError as err:
        raise TypeError(f"Don't know how to serialize {type(obj).__name__!r}") from err
    return {k: v for k, v in attrs.items() if not k.startswith("_")}


@to_dict.register
def _(obj: BaseModel) -> dict[str, Any]:
    return obj.model_dump()


@to_dict.register
def _(obj: Mapping) -> dict[str, Any]:
    return dict(obj)
