import pytest

from tests.fixtures.shop.models import Product, Widget
from veneer import Decorator
from veneer.registry import (
    BaseRegistry,
    DecoratorRegistry,
    RegistryCollisionError,
    RegistryFrozenError,
    RegistryLookupError,
)


class Alpha:
    pass


class Beta:
    pass


def test_base_registry_register_and_get():
    registry = BaseRegistry(coerce_key=str.lower)
    registry.register("Alpha", Alpha)

    assert registry.get("alpha") is Alpha
    assert registry.try_get("ALPHA") is Alpha
    assert "alpha" in registry
    assert registry.count() == 1
    assert registry.items() == (("alpha", Alpha),)


def test_missing_key():
    registry = BaseRegistry(coerce_key=str)

    assert registry.try_get("missing") is None
    with pytest.raises(RegistryLookupError):
        registry.get("missing")
    with pytest.raises(LookupError):
        registry.get("missing")


def test_duplicate_registration_is_idempotent():
    registry = BaseRegistry(coerce_key=str)
    registry.register("a", Alpha)
    registry.register("a", Alpha)

    assert registry.count() == 1


def test_collision_requires_replace():
    registry = BaseRegistry(coerce_key=str)
    registry.register("a", Alpha)

    with pytest.raises(RegistryCollisionError):
        registry.register("a", Beta)

    registry.register("a", Beta, replace=True)
    assert registry.get("a") is Beta


def test_iterating_yields_key_class_pairs():
    registry = BaseRegistry(coerce_key=str)
    registry.register("a", Alpha)
    registry.register("b", Beta)

    assert list(registry) == [("a", Alpha), ("b", Beta)]
    assert dict(registry) == {"a": Alpha, "b": Beta}


def test_unregister_and_clear():
    registry = BaseRegistry(coerce_key=str)
    registry.register("a", Alpha)
    registry.register("b", Beta)

    registry.unregister("a")
    assert "a" not in registry

    registry.clear()
    assert registry.count() == 0


def test_frozen_registry_rejects_mutation():
    registry = BaseRegistry(coerce_key=str)
    registry.register("a", Alpha)
    registry.freeze()

    with pytest.raises(RegistryFrozenError):
        registry.register("b", Beta)
    with pytest.raises(RegistryFrozenError):
        registry.unregister("a")
    with pytest.raises(RuntimeError):
        registry.clear()
    assert registry.get("a") is Alpha


def test_decorator_registry_lookup_walks_the_mro():
    registry = DecoratorRegistry()

    class SaleProduct(Product):
        pass

    class ProductPresenter(Decorator):
        pass

    registry.register(Product, ProductPresenter)

    assert registry.lookup(SaleProduct) is ProductPresenter
    assert registry.lookup(Widget) is None


def test_decorators_are_indexed_by_name_on_definition(isolated_registry):
    class Presenter(Decorator):
        pass

    assert Presenter in isolated_registry.named(Presenter.__qualname__)


def test_forget_drops_both_indexes(isolated_registry):
    class Presenter(Decorator):
        pass

    isolated_registry.register(Product, Presenter)
    isolated_registry.forget(Presenter)

    assert isolated_registry.lookup(Product) is None
    assert Presenter not in isolated_registry.named(Presenter.__qualname__)
