"""Tracking of the active helpers backend.

A ``ContextVar`` holds the helpers object used by every
:class:`~veneer.helpers.HelperProxy`; :func:`push_helpers` gives predictable
nesting for tests and request-scoped overrides.
"""

from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar

from .exceptions import HelpersNotConfiguredError

_current_helpers: ContextVar[object | None] = ContextVar("veneer_current_helpers", default=None)
_default_helpers: object | None = None


def get_current_helpers() -> object:
    """Return the active helpers backend, falling back to the process default."""
    helpers = _current_helpers.get()
    if helpers is None:
        helpers = _default_helpers
    if helpers is None:
        raise HelpersNotConfiguredError(
            "No helpers backend installed; add 'veneer_django' to INSTALLED_APPS "
            "or call veneer.set_helpers()."
        )
    return helpers


def set_helpers(helpers: object | None) -> None:
    """Install ``helpers`` as the process-wide default backend."""
    global _default_helpers
    _default_helpers = helpers


@contextmanager
def push_helpers(helpers: object) -> Generator[object, None, None]:
    token = _current_helpers.set(helpers)
    try:
        yield helpers
    finally:
        _current_helpers.reset(token)


__all__ = ["get_current_helpers", "push_helpers", "set_helpers"]
