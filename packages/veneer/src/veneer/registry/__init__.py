# veneer/registry/__init__.py
from .base import BaseRegistry
from .decorators import DecoratorRegistry
from .exceptions import (
    RegistryCollisionError,
    RegistryError,
    RegistryFrozenError,
    RegistryLookupError,
)

#: Process-wide decorator registry.
decorators = DecoratorRegistry()

__all__ = [
    "BaseRegistry",
    "DecoratorRegistry",
    "RegistryCollisionError",
    "RegistryError",
    "RegistryFrozenError",
    "RegistryLookupError",
    "decorators",
]
