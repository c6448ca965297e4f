# veneer_django/serialization.py
"""Teach :func:`veneer.serialization.to_dict` about Django models."""

from typing import Any

from django.db import models

from veneer.serialization import to_dict


@to_dict.register
def model_to_dict(obj: models.Model) -> dict[str, Any]:
    """Every concrete field by name; foreign keys contribute their raw id."""
    return {field.name: field.value_from_object(obj) for field in obj._meta.concrete_fields}
