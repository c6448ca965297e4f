# veneer/options.py
"""
Option models for decorator constructors and factories.

Every public entry point takes keyword options and validates them through one
of the models below before touching any state, so an unknown key fails the
whole call with :class:`~veneer.exceptions.ConfigurationError`.

``with`` is a Python keyword, so the item-decorator option is spelled
``with_`` at call sites; the model also accepts ``with`` from mappings.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError

__all__ = (
    "AssociationOptions",
    "CollectionOptions",
    "DecoratorOptions",
    "INFER",
    "validate_options",
)

#: Sentinel value for ``with_`` requesting per-item decorator inference.
INFER = "infer"

M = TypeVar("M", bound="_Options")


class _Options(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        arbitrary_types_allowed=True,
        frozen=True,
    )

    def given(self, name: str) -> bool:
        """True when ``name`` was passed explicitly (even as ``None``)."""
        return name in self.model_fields_set

    def forwardable(self) -> dict[str, Any]:
        """Return the explicitly passed options as call-site keyword arguments."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class DecoratorOptions(_Options):
    context: Any = None


class CollectionOptions(DecoratorOptions):
    with_: Any = Field(None, alias="with")


class AssociationOptions(CollectionOptions):
    # Either the name of a method on the raw association, or a callable taking it.
    scope: Any = None


def validate_options(model: type[M], options: Mapping[str, Any], *, owner: str | None = None) -> M:
    """Validate ``options`` against ``model``, raising ConfigurationError on unknown keys."""
    try:
        return model.model_validate(dict(options))
    except ValidationError as exc:
        unknown = [
            ".".join(str(part) for part in err["loc"])
            for err in exc.errors()
            if err["type"] == "extra_forbidden"
        ]
        if not unknown:
            raise
        raise ConfigurationError(unknown, owner=owner) from exc
