"""Helper proxy exposed to decorators as ``decorator.helpers`` / ``decorator.h``."""

from typing import Any

from ._state import get_current_helpers
from .exceptions import HelpersNotConfiguredError


class HelperProxy:
    """Forwards helper lookups to the helpers backend active at lookup time.

    Attributes assigned on a proxy stay on that proxy, so one decorator's
    helpers can be stubbed without touching the shared backend.
    """

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__"):
            raise AttributeError(name)
        return getattr(get_current_helpers(), name)

    def __repr__(self) -> str:
        try:
            backend = get_current_helpers()
        except HelpersNotConfiguredError:
            return "<HelperProxy (no backend)>"
        return f"<HelperProxy for {backend!r}>"


__all__ = ["HelperProxy"]
