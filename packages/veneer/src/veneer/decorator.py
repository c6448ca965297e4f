# veneer/decorator.py
"""
Core decorator type.

A :class:`Decorator` owns one source object and a ``context`` mapping. Public
attributes it does not define itself are read from the source, so a
decorator can stand in for its model anywhere presentation code expects one:

    class ProductDecorator(Decorator):
        def display_price(self):
            return f"{self.price:.2f} {self.context.get('currency', 'EUR')}"

    product = ProductDecorator.decorate(Product(price=3), context={"currency": "USD"})
    product.display_price()   # "3.00 USD"
    product.price             # 3, read from the source

Decorating an instance of the same decorator type unwraps it instead of
double-wrapping; decorating a decorator of another type nests.
"""

import inspect
import logging
import warnings
from typing import Any, ClassVar

from .conf import settings
from .delegation import Delegated, defined_on, is_private
from .exceptions import DelegationError, InferenceError, RedecorationWarning, UninferrableSourceError
from .finders import DecoratedFinder
from .helpers import HelperProxy
from .inference import infer_collection_decorator_class, infer_source_class, resolve_source_name
from .options import CollectionOptions, DecoratorOptions, validate_options
from .registry import decorators as registry
from .serialization import to_dict
from .utils.stack import external_caller

logger = logging.getLogger(__name__)

__all__ = ["Decorator", "DecoratorMeta"]

_MISSING = object()


class DecoratorMeta(type):
    """Metaclass forwarding missing class attributes to the decorated source class.

    ``ProductDecorator.objects`` reads ``Product.objects`` when the source class
    can be inferred; private names are never forwarded. Names declared with
    :meth:`Decorator.decorates_finders` come back as :class:`DecoratedFinder`.
    ``helpers`` and ``h`` read at class level give a per-class helper proxy.
    """

    def __init__(cls, name: str, bases: tuple[type, ...], attrs: dict[str, Any], **kwargs: Any) -> None:
        super().__init__(name, bases, attrs, **kwargs)
        registry.index(cls)

    def __getattr__(cls, name: str) -> Any:
        message = f"type object {cls.__qualname__!r} has no attribute {name!r}"
        if is_private(name):
            raise AttributeError(message)
        try:
            source_cls = cls.source_class()
        except InferenceError:
            raise AttributeError(message) from None
        try:
            value = getattr(source_cls, name)
        except AttributeError:
            raise AttributeError(message) from None
        if name in cls._finder_names:
            return DecoratedFinder(cls, value)
        return value

    @property
    def helpers(cls) -> HelperProxy:
        """Helpers for class-level code, one proxy per decorator class."""
        proxy = cls.__dict__.get("_class_helpers")
        if proxy is None:
            proxy = HelperProxy()
            cls._class_helpers = proxy
        return proxy

    @property
    def h(cls) -> HelperProxy:
        return cls.helpers


class Decorator(metaclass=DecoratorMeta):
    """Wraps a source object, adding presentation behavior and delegating the rest."""

    #: Collection decorator used by :meth:`decorate_collection`; inferred when None.
    collection_decorator_class: ClassVar[type | None] = None

    _declared_source: ClassVar[Any] = None
    _finder_names: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, source: Any, **options: Any) -> None:
        """
        :param source: The object to wrap. Passing an instance of this same
            decorator class wraps that instance's source instead.
        :param context: Mapping of presentation parameters. When re-wrapping an
            instance of this class and ``context`` is omitted, the existing
            context is kept.
        :raises ConfigurationError: On any other keyword option.
        """
        opts = validate_options(DecoratorOptions, options, owner=type(self).__qualname__)
        if source is None:
            raise TypeError(f"{type(self).__qualname__} cannot decorate None")

        context = opts.context if opts.given("context") else {}
        if type(source) is type(self):
            if not opts.given("context"):
                context = source.context
            source = source.source
        elif isinstance(source, Decorator) and type(self) in source.applied_decorators():
            self._warn_redecoration()

        self.source = source
        self.context = context

    def _warn_redecoration(self) -> None:
        if not settings["WARN_ON_REDECORATION"]:
            return
        filename, lineno, stacklevel = external_caller()
        warnings.warn(
            f"Reapplying {type(self).__qualname__} to a target that is already decorated "
            f"with it. Called from {filename}:{lineno}",
            RedecorationWarning,
            stacklevel=stacklevel,
        )

    # ---------------- factories ----------------

    @classmethod
    def decorate(cls, source: Any, **options: Any) -> "Decorator":
        """Decorate ``source``; see :meth:`__init__` for the collapse rules."""
        return cls(source, **options)

    @classmethod
    def decorate_collection(cls, sources: Any, **options: Any):
        """Decorate every item of ``sources`` and return a collection decorator.

        :param with_: Item decorator. Defaults to this class; ``"infer"`` infers
            one per item; a collection decorator class is used as the collection
            type with its own item default.
        :param context: Forwarded to the collection and every item.
        """
        from .collection import CollectionDecorator

        opts = validate_options(CollectionOptions, options, owner=f"{cls.__qualname__}.decorate_collection")
        forwarded = opts.forwardable()
        with_ = forwarded.pop("with_", cls)

        if isinstance(with_, type) and issubclass(with_, CollectionDecorator):
            return with_(sources, **forwarded)

        collection_cls = (
            cls.collection_decorator_class
            or infer_collection_decorator_class(cls)
            or CollectionDecorator
        )
        return collection_cls(sources, with_=with_, **forwarded)

    # ---------------- source class ----------------

    @classmethod
    def decorates(cls, source: type | str) -> None:
        """Declare the source class explicitly, as a class or a (dotted) name.

        Bare names are camelized and resolved like inferred names
        (``"sample_product"`` -> ``SampleProduct``).
        """
        cls._declared_source = source

    @classmethod
    def source_class(cls) -> type:
        """The decorated class, declared with :meth:`decorates` or inferred from the name.

        :raises UninferrableSourceError: if neither works.
        """
        declared = cls.__dict__.get("_declared_source")
        if declared is None:
            return infer_source_class(cls)
        if isinstance(declared, str):
            declared = resolve_source_name(cls, declared)
            cls._declared_source = declared
        return declared

    @classmethod
    def has_source_class(cls) -> bool:
        try:
            cls.source_class()
        except UninferrableSourceError:
            return False
        return True

    @classmethod
    def decorates_finders(cls, *names: str) -> None:
        """Decorate what the source class's finders return.

        ``names`` are manager or finder attributes of the source class,
        ``"objects"`` when none are given. Reading one of them through this
        decorator class returns a :class:`~veneer.finders.DecoratedFinder`.
        """
        cls._finder_names = cls._finder_names | frozenset(names or ("objects",))

    # ---------------- delegation ----------------

    @classmethod
    def delegate(cls, *names: str, to: str = "source") -> None:
        """Forward the named attributes to ``to`` (the source by default)."""
        for name in names:
            setattr(cls, name, Delegated(name, to=to))

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

    def responds_to(self, name: str, include_private: bool = False) -> bool:
        """Whether ``name`` can be read from this decorator.

        Own members count (private ones only with ``include_private``); source
        members count only when public.
        """
        if defined_on(self, name):
            return include_private or not is_private(name)
        return not is_private(name) and hasattr(self.source, name)

    def __dir__(self) -> list[str]:
        delegated = {name for name in dir(self.source) if not is_private(name)}
        return sorted(set(super().__dir__()) | delegated)

    # ---------------- associations ----------------

    @classmethod
    def decorates_association(cls, association: str, **options: Any) -> None:
        """Replace the ``association`` attribute with a memoized decorated accessor.

        :param with_: Decorator (or collection decorator) class to use.
        :param scope: Method name or callable applied to the raw association first.
        :param context: Static context, or callable deriving it from the owner's context.
        """
        from .association import DecoratesAssociation

        descriptor = DecoratesAssociation(**options)
        descriptor.__set_name__(cls, association)
        setattr(cls, association, descriptor)

    @classmethod
    def decorates_associations(cls, *associations: str, **options: Any) -> None:
        for association in associations:
            cls.decorates_association(association, **options)

    # ---------------- decoration state ----------------

    def applied_decorators(self) -> list[type]:
        """Decorator classes in the chain, innermost first."""
        chain = []
        obj: Any = self
        while isinstance(obj, Decorator):
            chain.append(type(obj))
            obj = obj.source
        chain.reverse()
        return chain

    def is_decorated_with(self, decorator_class: type) -> bool:
        return decorator_class in self.applied_decorators()

    def is_decorated(self) -> bool:
        return True

    # ---------------- helpers ----------------

    @property
    def helpers(self) -> HelperProxy:
        proxy = self.__dict__.get("_helpers")
        if proxy is None:
            proxy = self.__dict__["_helpers"] = HelperProxy()
        return proxy

    @property
    def h(self) -> HelperProxy:
        return self.helpers

    def localize(self, *args: Any, **kwargs: Any) -> Any:
        return self.helpers.localize(*args, **kwargs)

    l = localize  # noqa: E741

    # ---------------- serialization ----------------

    def serializable_dict(self) -> dict[str, Any]:
        """The source's dict form, with attributes this decorator overrides taking precedence."""
        data = to_dict(self.source)
        for key in data:
            if defined_on(self, key, stop=Decorator):
                value = getattr(self, key)
                data[key] = value() if inspect.ismethod(value) else value
        return data

    # ---------------- identity ----------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        return self.source == other

    def __hash__(self) -> int:
        return hash(self.source)

    def __str__(self) -> str:
        return str(self.source)

    def __repr__(self) -> str:
        return f"<{type(self).__qualname__} of {self.source!r}>"
