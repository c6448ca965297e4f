# veneer_django/apps.py


"""
veneer_django.apps
==================

Django integration for veneer.

Settings
--------
- VENEER (dict): overrides for :data:`veneer.conf.settings`, e.g.
  ``{"DECORATOR_SUFFIX": "Presenter", "AUTODISCOVER": False}``.
- VENEER["HELPERS"] (str): import path of a helpers class to install instead
  of :class:`~veneer_django.helpers.DjangoHelpers`.
"""

import logging

from django.apps import AppConfig
from django.conf import settings as dj_settings
from django.utils.module_loading import autodiscover_modules, import_string

from veneer import configure, set_helpers
from veneer.conf import settings as veneer_settings

logger = logging.getLogger(__name__)


def _build_helpers() -> object:
    path = veneer_settings["HELPERS"]
    if path:
        return import_string(path)()

    from .helpers import DjangoHelpers

    return DjangoHelpers()


class VeneerConfig(AppConfig):
    """Django AppConfig for veneer."""

    name = "veneer_django"
    verbose_name = "Veneer"

    def ready(self) -> None:
        overrides = getattr(dj_settings, "VENEER", None) or {}
        configure(overrides)

        set_helpers(_build_helpers())

        from . import serialization  # noqa: F401  registers the model serializer

        if not veneer_settings["AUTODISCOVER"]:
            logger.debug("veneer autodiscovery disabled")
            return

        for module_name in veneer_settings["DECORATOR_MODULES"]:
            autodiscover_modules(module_name)
        logger.info("veneer ready; discovered %s modules", ", ".join(veneer_settings["DECORATOR_MODULES"]))
