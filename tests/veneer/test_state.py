import pytest

import veneer._state
from tests.fixtures.shop.models import Product
from tests.fixtures.shop.decorators import DecoratorWithHelpers
from veneer import HelperProxy, HelpersNotConfiguredError, get_current_helpers, push_helpers, set_helpers


class Backend:
    def __init__(self, name):
        self.name = name

    def shout(self, text):
        return f"{self.name}:{text}"


def test_push_helpers_nests_and_restores():
    outer, inner = Backend("outer"), Backend("inner")

    with push_helpers(outer):
        assert get_current_helpers() is outer
        with push_helpers(inner):
            assert get_current_helpers() is inner
        assert get_current_helpers() is outer


def test_default_helpers_are_the_fallback(monkeypatch):
    monkeypatch.setattr(veneer._state, "_default_helpers", None)
    backend = Backend("default")
    set_helpers(backend)

    assert get_current_helpers() is backend


def test_missing_backend_raises(monkeypatch):
    monkeypatch.setattr(veneer._state, "_default_helpers", None)

    with pytest.raises(HelpersNotConfiguredError):
        get_current_helpers()
    with pytest.raises(RuntimeError):
        DecoratorWithHelpers(Product()).shouted_title()


def test_proxy_resolves_the_backend_at_call_time():
    proxy = HelperProxy()

    with push_helpers(Backend("first")):
        assert proxy.shout("hi") == "first:hi"
    with push_helpers(Backend("second")):
        assert proxy.shout("hi") == "second:hi"
