# veneer/exceptions.py
"""Unified exception hierarchy for veneer."""

from collections.abc import Iterable


class VeneerError(Exception): ...


class ConfigurationError(VeneerError, TypeError):
    """Raised when a constructor or factory receives option keys it does not accept."""

    def __init__(self, keys: Iterable[str], *, owner: str | None = None) -> None:
        self.keys = tuple(keys)
        self.owner = owner
        joined = ", ".join(repr(k) for k in self.keys)
        where = f" for {owner}" if owner else ""
        super().__init__(f"Unknown key(s){where}: {joined}")


class InferenceError(VeneerError):
    """Base for naming-convention and registry inference failures."""

    def __init__(self, klass: type, message: str | None = None) -> None:
        self.klass = klass
        super().__init__(message or self.default_message(klass))

    @staticmethod
    def default_message(klass: type) -> str:  # pragma: no cover - overridden
        return f"Could not infer a class for {klass!r}"


class UninferrableSourceError(InferenceError):
    @staticmethod
    def default_message(klass: type) -> str:
        return f"Could not infer a source for {getattr(klass, '__qualname__', klass)}."


class UninferrableDecoratorError(InferenceError):
    @staticmethod
    def default_message(klass: type) -> str:
        return f"Could not infer a decorator for {getattr(klass, '__qualname__', klass)}."


class DelegationError(VeneerError, AttributeError):
    """Raised when an attribute is neither defined on a decorator nor delegatable to its source."""


class DecorationError(VeneerError, RuntimeError):
    """Raised when decorating the items of a collection fails with an attribute error."""


class HelpersNotConfiguredError(VeneerError, RuntimeError):
    """Raised when a helper is used before any helpers backend is installed."""


class RedecorationWarning(UserWarning):
    """Emitted when a decorator type is re-applied to a chain that already contains it."""
