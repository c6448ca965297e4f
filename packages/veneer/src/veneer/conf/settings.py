"""
Layered veneer settings.

Lookups go through three layers, first hit wins:

1. overrides set with :meth:`Settings.update` / item assignment / ``configure()``;
2. any extra layers passed to the constructor;
3. :data:`~veneer.conf.defaults.DEFAULTS`.

Only known keys are accepted, and values are normalized on the way in, so
``SOURCE_MODULES="models"`` and ``WARN_ON_REDECORATION="0"`` (as read from a
settings module or the environment) behave like their typed forms.
"""

import importlib
import logging
import os
from collections import ChainMap
from collections.abc import Callable, Iterator, Mapping, MutableMapping
from typing import Any

from ..exceptions import ConfigurationError
from .defaults import DEFAULTS

logger = logging.getLogger(__name__)

ENVVAR = "VENEER_CONFIG_MODULE"
NAMESPACE = "VENEER"


def _as_tuple(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    return tuple(value)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


_NORMALIZERS: dict[str, Callable[[Any], Any]] = {
    "SOURCE_MODULES": _as_tuple,
    "DECORATOR_MODULES": _as_tuple,
    "WARN_ON_REDECORATION": _as_bool,
    "AUTODISCOVER": _as_bool,
}


def _normalize(mapping: Mapping[str, Any], *, owner: str) -> dict[str, Any]:
    unknown = [key for key in mapping if key not in DEFAULTS]
    if unknown:
        raise ConfigurationError(unknown, owner=owner)
    return {key: _NORMALIZERS.get(key, lambda v: v)(value) for key, value in mapping.items()}


class Settings(MutableMapping[str, Any]):
    """Mapping view over overrides, extra layers and defaults."""

    def __init__(self, *layers: Mapping[str, Any]) -> None:
        normalized = [_normalize(layer, owner="Settings") for layer in layers]
        self._storage = ChainMap({}, *normalized, dict(DEFAULTS))

    @property
    def overrides(self) -> dict[str, Any]:
        return self._storage.maps[0]

    def __getitem__(self, key: str) -> Any:
        return self._storage[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.overrides.update(_normalize({key: value}, owner="Settings"))

    def __delitem__(self, key: str) -> None:
        # Deleting only drops the override; the key keeps resolving to a lower layer.
        del self.overrides[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._storage)

    def __len__(self) -> int:
        return len(self._storage)

    def update_from_mapping(self, mapping: Mapping[str, Any], *, namespace: str | None = None) -> None:
        """Apply the upper-case keys of ``mapping``, optionally under a ``NAMESPACE_`` prefix."""
        picked = _pick(mapping, namespace)
        self.overrides.update(_normalize(picked, owner="configure"))
        if picked:
            logger.debug("veneer settings updated: %s", ", ".join(sorted(picked)))

    def update_from_object(self, module_name: str, *, namespace: str | None = NAMESPACE) -> None:
        module = importlib.import_module(module_name)
        self.update_from_mapping(vars(module), namespace=namespace)

    def update_from_envvar(self, envvar: str = ENVVAR, *, namespace: str | None = NAMESPACE) -> None:
        """Load ``VENEER_*`` names from the module named by ``$VENEER_CONFIG_MODULE``, if set."""
        module_name = os.environ.get(envvar)
        if module_name:
            self.update_from_object(module_name, namespace=namespace)

    def reset(self) -> None:
        """Drop every override."""
        self.overrides.clear()

    def as_dict(self) -> dict[str, Any]:
        return dict(self._storage)


def _pick(mapping: Mapping[str, Any], namespace: str | None) -> dict[str, Any]:
    if namespace is None:
        return {key: value for key, value in mapping.items() if key.isupper()}
    prefix = f"{namespace}_"
    return {key[len(prefix) :]: value for key, value in mapping.items() if key.startswith(prefix)}
