# tests/fixtures/shop/decorators.py
from veneer import CollectionDecorator, Decorator


class ProductDecorator(Decorator):
    def awesome_title(self) -> str:
        return f"Awesome {self.title}"

    def overridable(self) -> str:
        return "overridden"

    def _awesome_private_title(self) -> str:
        return f"Awesome private {self.title}"

    @classmethod
    def my_class_method(cls) -> str:
        return "my class method"


class ProductsDecorator(CollectionDecorator):
    pass


class SpecificProductDecorator(ProductDecorator):
    pass


class WidgetDecorator(ProductDecorator):
    pass


class GadgetDecorator(Decorator):
    pass


class DecoratorWithHelpers(Decorator):
    def shouted_title(self) -> str:
        return self.h.shout(self.title)


class Namespace:
    class ProductDecorator(Decorator):
        pass


class ProductPresenter(Decorator):
    """Only inferrable when the decorator suffix is configured as "Presenter"."""
