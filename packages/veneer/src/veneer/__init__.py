"""
veneer: presentation decorators for domain and model objects.

This package provides the framework-agnostic decoration layer:

- Single-object decorators with attribute delegation (`veneer.decorator`)
- Collection decorators (`veneer.collection`)
- Lazily decorated associations (`veneer.association`)
- Decorated finders on decorator classes (`veneer.finders`)
- The `Decoratable` mixin for source objects (`veneer.decoratable`)
- Decorator registry and naming-convention inference (`veneer.registry`, `veneer.inference`)
- Unified exception hierarchy (`veneer.exceptions`)

Framework integrations (e.g. `veneer_django`) install a helpers backend and
add ORM-specific conveniences on top of this layer.
"""

from importlib.metadata import PackageNotFoundError, version

from ._state import get_current_helpers, push_helpers, set_helpers
from .association import DecoratedAssociation, DecoratesAssociation
from .collection import CollectionDecorator
from .conf import configure, settings
from .decoratable import Decoratable
from .decorator import Decorator
from .delegation import Delegated
from .exceptions import (
    ConfigurationError,
    DecorationError,
    DelegationError,
    HelpersNotConfiguredError,
    RedecorationWarning,
    UninferrableDecoratorError,
    UninferrableSourceError,
    VeneerError,
)
from .finders import DecoratedFinder
from .helpers import HelperProxy
from .inference import infer_decorator_class
from .options import INFER
from .registry import decorators as registry

try:
    __version__ = version("veneer")
except PackageNotFoundError:  # pragma: no cover - source checkout
    __version__ = "0.0.0"


def register(source_cls: type):
    """Class decorator registering a decorator for ``source_cls`` explicitly.

        @veneer.register(Product)
        class ProductPresenter(Decorator):
            ...

    Registered decorators win over naming conventions, for ``source_cls`` and
    its subclasses.
    """

    def _apply(decorator_cls: type) -> type:
        decorator_cls.decorates(source_cls)
        registry.register(source_cls, decorator_cls)
        return decorator_cls

    return _apply


__all__ = [
    "CollectionDecorator",
    "ConfigurationError",
    "Decoratable",
    "DecoratedAssociation",
    "DecoratesAssociation",
    "DecoratedFinder",
    "Decorator",
    "Delegated",
    "DecorationError",
    "DelegationError",
    "HelperProxy",
    "HelpersNotConfiguredError",
    "INFER",
    "RedecorationWarning",
    "UninferrableDecoratorError",
    "UninferrableSourceError",
    "VeneerError",
    "configure",
    "get_current_helpers",
    "infer_decorator_class",
    "push_helpers",
    "register",
    "registry",
    "set_helpers",
    "settings",
]
