"""Process-wide veneer settings.

``settings`` is populated from defaults, then from the module named by the
``VENEER_CONFIG_MODULE`` environment variable (its ``VENEER_*`` names), and
finally from explicit :func:`configure` calls.
"""

from typing import Any

from .defaults import DEFAULTS
from .settings import Settings

settings = Settings()
settings.update_from_envvar()


def configure(mapping: dict[str, Any] | None = None, **overrides: Any) -> Settings:
    """Apply overrides to the shared settings and return them."""
    if mapping:
        settings.update_from_mapping(mapping, namespace=None)
    if overrides:
        settings.update_from_mapping({k.upper(): v for k, v in overrides.items()}, namespace=None)
    return settings


__all__ = ["DEFAULTS", "Settings", "configure", "settings"]
