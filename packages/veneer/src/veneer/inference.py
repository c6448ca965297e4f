# veneer/inference.py
"""
Naming-convention inference between sources, decorators and collection decorators.

Conventions (the suffix is ``settings["DECORATOR_SUFFIX"]``):

- ``ProductDecorator``  decorates ``Product``
- ``ProductsDecorator`` is the collection decorator for ``ProductDecorator``
- ``Namespace.ProductDecorator`` decorates ``Namespace.Product``

Names are resolved against a module first, then against its sibling modules:
a decorator in ``shop.decorators`` finds its source in ``shop.models`` and a
source in ``shop.models`` finds its decorator in ``shop.decorators``. The
sibling module names come from ``SOURCE_MODULES`` and ``DECORATOR_MODULES``.

Explicit registrations in :data:`veneer.registry.decorators` always win over
conventions.
"""

import importlib
import logging
import re
from collections.abc import Iterable, Iterator
from typing import Any

from .conf import settings
from .exceptions import UninferrableDecoratorError, UninferrableSourceError
from .registry import decorators as registry

__all__ = [
    "camelize",
    "import_from_path",
    "infer_collection_decorator_class",
    "infer_decorator_class",
    "infer_item_decorator_class",
    "infer_source_class",
    "pluralize",
    "resolve_qualname",
    "singularize",
]

logger = logging.getLogger(__name__)

_LOCALS = "<locals>"


# ---------------- inflection ----------------

_PLURAL_RULES: tuple[tuple[str, str], ...] = (
    (r"(?i)(quiz)$", r"\1zes"),
    (r"(?i)([^aeiouy]|qu)y$", r"\1ies"),
    (r"(?i)(x|ch|ss|sh|z)$", r"\1es"),
    (r"(?i)(?<!f)fe$", "ves"),
    (r"(?i)([^s])$", r"\1s"),
)

_SINGULAR_RULES: tuple[tuple[str, str], ...] = (
    (r"(?i)(quiz)zes$", r"\1"),
    (r"(?i)([^aeiouy]|qu)ies$", r"\1y"),
    (r"(?i)(x|ch|ss|sh|z)es$", r"\1"),
    (r"(?i)ves$", "fe"),
    (r"(?i)([^s])s$", r"\1"),
)


def _inflect(word: str, rules: tuple[tuple[str, str], ...]) -> str:
    for pattern, replacement in rules:
        if re.search(pattern, word):
            return re.sub(pattern, replacement, word)
    return word


def pluralize(word: str) -> str:
    """Naive English plural of a CamelCase word's last segment."""
    return _inflect(word, _PLURAL_RULES)


def singularize(word: str) -> str:
    """Inverse of :func:`pluralize` for the same rule set."""
    return _inflect(word, _SINGULAR_RULES)


def camelize(name: str) -> str:
    """``sample_product`` -> ``SampleProduct``; CamelCase input is returned unchanged."""
    if "_" not in name and name[:1].isupper():
        return name
    return "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)


# ---------------- module / qualname resolution ----------------


def _import(module_name: str) -> Any | None:
    try:
        return importlib.import_module(module_name)
    except ModuleNotFoundError as exc:
        # Only the module itself or one of its parent packages may be missing.
        missing = exc.name or ""
        if missing != module_name and not module_name.startswith(missing + "."):
            raise
        return None


def resolve_qualname(module_name: str, qualname: str) -> Any | None:
    """Resolve a dotted qualified name inside a module, or return None."""
    module = _import(module_name)
    if module is None:
        return None
    obj: Any = module
    for attr in qualname.split("."):
        obj = getattr(obj, attr, None)
        if obj is None:
            return None
    return obj


def import_from_path(path: str) -> Any:
    """Import and return an object from ``module:attr`` or ``module.attr`` paths."""
    if ":" in path:
        mod_path, attr = path.split(":", 1)
        found = resolve_qualname(mod_path, attr)
        if found is None:
            raise ImportError(f"Could not import {path}")
        return found

    parts = path.split(".")
    for i in range(len(parts) - 1, 0, -1):
        found = resolve_qualname(".".join(parts[:i]), ".".join(parts[i:]))
        if found is not None:
            return found
    raise ImportError(f"Could not import {path}")


def _siblings(module_name: str, from_names: Iterable[str], to_names: Iterable[str]) -> Iterator[str]:
    """Yield sibling module paths, e.g. ``shop.decorators`` -> ``shop.models``."""
    parts = module_name.split(".")
    from_names = tuple(from_names)
    to_names = tuple(to_names)
    for i in range(len(parts) - 1, -1, -1):
        if parts[i] not in from_names:
            continue
        for to in to_names:
            yield ".".join(parts[:i] + [to] + parts[i + 1 :])
            if i + 1 < len(parts):
                yield ".".join(parts[:i] + [to])


def _candidate_modules(module_name: str, from_key: str, to_key: str) -> list[str]:
    modules = [module_name]
    for sibling in _siblings(module_name, settings[from_key], settings[to_key]):
        if sibling not in modules:
            modules.append(sibling)
    return modules


def _resolve_in(modules: Iterable[str], qualname: str) -> Any | None:
    for module_name in modules:
        found = resolve_qualname(module_name, qualname)
        if isinstance(found, type):
            return found
    return None


def _split_qualname(qualname: str) -> tuple[str, str]:
    prefix, _, last = qualname.rpartition(".")
    return (f"{prefix}." if prefix else ""), last


def _strip_suffix(qualname: str) -> str | None:
    suffix = settings["DECORATOR_SUFFIX"]
    prefix, last = _split_qualname(qualname)
    if not last.endswith(suffix) or last == suffix:
        return None
    return prefix + last[: -len(suffix)]


# ---------------- decorator -> source ----------------


def resolve_source_name(decorator_cls: type, name: str) -> type:
    """Resolve an explicitly declared source name relative to ``decorator_cls``."""
    if "." in name or ":" in name:
        try:
            found = import_from_path(name)
        except ImportError as err:
            raise UninferrableSourceError(decorator_cls) from err
    else:
        modules = _candidate_modules(decorator_cls.__module__, "DECORATOR_MODULES", "SOURCE_MODULES")
        found = _resolve_in(modules, camelize(name))
    if not isinstance(found, type):
        raise UninferrableSourceError(decorator_cls)
    return found


def infer_source_class(decorator_cls: type) -> type:
    """Infer the source class from a decorator's name, e.g. ``ProductDecorator`` -> ``Product``."""
    qualname = decorator_cls.__qualname__
    if _LOCALS in qualname:
        raise UninferrableSourceError(decorator_cls)

    target = _strip_suffix(qualname)
    if target is None:
        raise UninferrableSourceError(decorator_cls)

    modules = _candidate_modules(decorator_cls.__module__, "DECORATOR_MODULES", "SOURCE_MODULES")
    found = _resolve_in(modules, target)
    if found is None:
        raise UninferrableSourceError(decorator_cls)

    logger.debug("Inferred source %s for %s", found.__qualname__, qualname)
    return found


# ---------------- source -> decorator ----------------


def _is_decorator_class(obj: Any) -> bool:
    from .decorator import Decorator

    return isinstance(obj, type) and issubclass(obj, Decorator)


def infer_decorator_class(source_cls: type) -> type:
    """Find the decorator for ``source_cls``: registry first, then naming conventions."""
    found = registry.lookup(source_cls)
    if found is not None:
        return found

    qualname = getattr(source_cls, "__qualname__", "")
    if not qualname or _LOCALS in qualname:
        raise UninferrableDecoratorError(source_cls)

    name = qualname + settings["DECORATOR_SUFFIX"]
    modules = _candidate_modules(source_cls.__module__, "SOURCE_MODULES", "DECORATOR_MODULES")
    candidate = _resolve_in(modules, name)
    if _is_decorator_class(candidate):
        logger.debug("Inferred decorator %s for %s", candidate.__qualname__, qualname)
        return candidate

    for candidate in registry.named(name):
        if candidate.has_source_class() and candidate.source_class() is source_cls:
            logger.debug("Matched indexed decorator %s for %s", candidate.__module__, qualname)
            return candidate

    raise UninferrableDecoratorError(source_cls)


# ---------------- decorator <-> collection decorator ----------------


def _resolve_sibling_decorator(owner: type, qualname: str, base: type) -> type | None:
    found = _resolve_in([owner.__module__], qualname)
    if isinstance(found, type) and issubclass(found, base):
        return found
    for candidate in registry.named(qualname):
        if issubclass(candidate, base) and candidate.__module__ == owner.__module__:
            return candidate
    return None


def infer_collection_decorator_class(decorator_cls: type) -> type | None:
    """``ProductDecorator`` -> ``ProductsDecorator`` if such a collection decorator exists."""
    from .collection import CollectionDecorator

    stripped = _strip_suffix(decorator_cls.__qualname__)
    if stripped is None or _LOCALS in stripped:
        return None
    prefix, last = _split_qualname(stripped)
    plural = prefix + pluralize(last) + settings["DECORATOR_SUFFIX"]
    return _resolve_sibling_decorator(decorator_cls, plural, CollectionDecorator)


def infer_item_decorator_class(collection_cls: type) -> type | None:
    """``ProductsDecorator`` -> ``ProductDecorator`` if such a decorator exists."""
    from .decorator import Decorator

    stripped = _strip_suffix(collection_cls.__qualname__)
    if stripped is None or _LOCALS in stripped:
        return None
    prefix, last = _split_qualname(stripped)
    singular = prefix + singularize(last) + settings["DECORATOR_SUFFIX"]
    return _resolve_sibling_decorator(collection_cls, singular, Decorator)
