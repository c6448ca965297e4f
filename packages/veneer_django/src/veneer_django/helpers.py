# veneer_django/helpers.py
"""
Template-helper style functions backed by Django's own utilities.

An instance of :class:`DjangoHelpers` is installed as the veneer helpers
backend when the app is ready, so decorators can write:

    def display_name(self):
        return self.h.content_tag("strong", self.name, class_="author")

Any name not defined here falls through to Django's built-in template
filters (``self.h.filesizeformat(1024)``, ``self.h.pluralize(3)``).
"""

from datetime import date, datetime, time
from typing import Any

from django.forms.utils import flatatt
from django.template.defaultfilters import register as builtin_filters
from django.template.loader import render_to_string
from django.urls import reverse
from django.utils import formats
from django.utils.html import escape, format_html, linebreaks
from django.utils.safestring import SafeString
from django.utils.text import Truncator


def _attr_name(name: str) -> str:
    # class_ -> class, data_id -> data-id
    return name.rstrip("_").replace("_", "-")


class DjangoHelpers:
    """Helpers for decorators, built on ``django.utils`` and the template layer."""

    def localize(self, value: Any, format: str | None = None, *, use_l10n: bool | None = None) -> str:
        """Localize numbers and dates; ``format`` names a Django date format for dates."""
        if format is not None and isinstance(value, (date, datetime, time)):
            if isinstance(value, time):
                return formats.time_format(value, format, use_l10n=use_l10n)
            return formats.date_format(value, format, use_l10n=use_l10n)
        return formats.localize(value, use_l10n=use_l10n)

    def date(self, value: date | datetime, format: str | None = None) -> str:
        """Format a date with a Django date format name or format string (``DATE_FORMAT`` by default)."""
        return formats.date_format(value, format)

    def escape(self, text: Any) -> SafeString:
        return escape(text)

    def format_html(self, format_string: str, *args: Any, **kwargs: Any) -> SafeString:
        return format_html(format_string, *args, **kwargs)

    def content_tag(self, tag: str, content: Any = "", **attrs: Any) -> SafeString:
        """``content_tag("span", "Hi", class_="x")`` -> ``<span class="x">Hi</span>``"""
        rendered = flatatt({_attr_name(k): v for k, v in attrs.items() if v is not None})
        return format_html("<{}{}>{}</{}>", tag, rendered, content, tag)

    def link_to(self, text: Any, url: str, **attrs: Any) -> SafeString:
        return self.content_tag("a", text, href=url, **attrs)

    def truncate(self, text: Any, length: int = 30, omission: str = "...") -> str:
        """Truncate to ``length`` characters including the omission marker."""
        return Truncator(text).chars(length, truncate=omission)

    def linebreaks(self, text: Any, autoescape: bool = True) -> SafeString:
        return linebreaks(text, autoescape=autoescape)

    def reverse(self, viewname: str, *args: Any, **kwargs: Any) -> str:
        return reverse(viewname, args=args or None, kwargs=kwargs or None)

    def render(self, template_name: str, context: dict[str, Any] | None = None, request: Any = None) -> str:
        return render_to_string(template_name, context, request=request)

    def __getattr__(self, name: str) -> Any:
        try:
            return builtin_filters.filters[name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}") from None
