import pytest

from tests.fixtures.shop.decorators import (
    GadgetDecorator,
    ProductDecorator,
    ProductsDecorator,
    SpecificProductDecorator,
    WidgetDecorator,
)
from tests.fixtures.shop.models import Gadget, Orphan, Product, Widget
from veneer import (
    INFER,
    CollectionDecorator,
    ConfigurationError,
    DecorationError,
    Decorator,
    DelegationError,
    UninferrableDecoratorError,
)


class Catalog(list):
    """A list with extra behavior, standing in for a query result."""

    def total(self):
        return sum(product.price for product in self)

    def _internal(self):
        return "internal"


def test_stores_source_and_defaults():
    source = [Product()]
    collection = CollectionDecorator(source)

    assert collection.source is source
    assert collection.context == {}


def test_unknown_option_fails_before_anything_is_stored():
    with pytest.raises(ConfigurationError, match="Unknown key"):
        CollectionDecorator([Product()], foo="bar")


def test_accepts_with_spelled_as_a_mapping_key():
    collection = CollectionDecorator([Product()], **{"with": SpecificProductDecorator})

    assert collection.decorator_class is SpecificProductDecorator


def test_generic_collection_infers_each_item():
    sources = [Product(), Widget()]
    collection = CollectionDecorator(sources)

    assert collection.decorator_class is None
    assert [type(item) for item in collection] == [ProductDecorator, WidgetDecorator]
    assert collection == sources


def test_items_that_are_not_decoratable_use_plain_inference():
    collection = CollectionDecorator([Gadget()])

    assert type(collection[0]) is GadgetDecorator


def test_uninferrable_item_raises_on_first_read():
    collection = CollectionDecorator([Orphan()])

    with pytest.raises(UninferrableDecoratorError):
        list(collection)


def test_explicit_item_decorator():
    collection = CollectionDecorator([Product(), Widget()], with_=SpecificProductDecorator)

    assert collection.decorator_class is SpecificProductDecorator
    assert all(type(item) is SpecificProductDecorator for item in collection)


def test_named_collection_infers_its_item_decorator():
    collection = ProductsDecorator([Product()])

    assert collection.decorator_class is ProductDecorator
    assert type(collection[0]) is ProductDecorator


def test_infer_overrides_the_class_default():
    collection = ProductsDecorator([Product(), Widget()], with_=INFER)

    assert collection.decorator_class is None
    assert [type(item) for item in collection] == [ProductDecorator, WidgetDecorator]


def test_item_decorator_class_attribute():
    class Featured(CollectionDecorator):
        item_decorator_class = SpecificProductDecorator

    assert type(Featured([Product()])[0]) is SpecificProductDecorator


def test_items_receive_the_collection_context():
    collection = CollectionDecorator([Product()], context={"some": "context"})

    assert collection[0].context == {"some": "context"}


def test_changing_the_context_reaches_decorated_items():
    collection = CollectionDecorator([Product(), Product()])
    list(collection)

    collection.context = {"other": "context"}

    assert [item.context for item in collection] == [{"other": "context"}] * 2


def test_already_decorated_items_are_not_double_wrapped():
    product = Product()
    collection = CollectionDecorator([ProductDecorator(product, context={"old": True})], context={"new": True})

    item = collection[0]
    assert type(item) is ProductDecorator
    assert item.source is product
    assert item.context == {"new": True}


def test_items_are_decorated_once_and_lazily():
    reads = []

    def sources():
        reads.append(1)
        yield Product()

    collection = CollectionDecorator(sources())
    assert reads == []

    first = collection[0]
    assert collection[0] is first
    assert len(collection) == 1
    assert reads == [1]
    assert collection.decorated_collection is collection.decorated_collection


def test_sequence_protocol():
    products = [Product(title="a"), Product(title="b"), Product(title="c")]
    collection = ProductsDecorator(products)

    assert len(collection) == 3
    assert [item.title for item in collection] == ["a", "b", "c"]
    assert [item.title for item in reversed(collection)] == ["c", "b", "a"]
    assert collection[-1].title == "c"
    assert collection[1:] == products[1:]
    assert products[0] in collection
    assert collection.index(products[1]) == 1
    assert bool(collection)
    assert not CollectionDecorator([])


def test_equality():
    products = [Product(), Product()]

    assert ProductsDecorator(products) == products
    assert ProductsDecorator(products) == tuple(products)
    assert ProductsDecorator(products) == CollectionDecorator(products)
    assert ProductsDecorator(products) != [Product()]
    assert ProductsDecorator(products) != "products"


def test_is_not_hashable():
    with pytest.raises(TypeError):
        hash(CollectionDecorator([]))


def test_is_decorated():
    assert CollectionDecorator([]).is_decorated()


def test_delegates_public_members_to_the_source():
    collection = ProductsDecorator(Catalog([Product(price=2), Product(price=3)]))

    assert collection.total() == 5


def test_count_asks_a_source_that_counts_itself():
    class Rows(list):
        counted = 0

        def count(self):
            Rows.counted += 1
            return len(self)

    collection = ProductsDecorator(Rows([Product(), Product()]))

    assert collection.count() == 2
    assert Rows.counted == 1


def test_count_of_a_plain_sequence():
    first, second = Product(), Product()
    collection = ProductsDecorator([first, second, first])

    assert collection.count() == 3
    assert ProductsDecorator((first,)).count() == 1
    assert collection.count(first) == 2


def test_attribute_errors_while_decorating_items_are_not_masked():
    class Broken(Decorator):
        def __init__(self, source, **options):
            super().__init__(source, **options)
            self.source.no_such_field

    collection = CollectionDecorator([Product()], with_=Broken)

    with pytest.raises(DecorationError, match="no_such_field") as excinfo:
        collection.decorated_collection
    assert isinstance(excinfo.value.__cause__, AttributeError)
    with pytest.raises(DecorationError):
        len(collection)


def test_does_not_delegate_private_members():
    collection = ProductsDecorator(Catalog())

    with pytest.raises(DelegationError):
        collection._internal()


def test_missing_member_raises_an_attribute_error():
    with pytest.raises(AttributeError):
        ProductsDecorator([]).missing


def test_decorate_factory():
    collection = ProductsDecorator.decorate([Product()], context={"a": 1})

    assert isinstance(collection, ProductsDecorator)
    assert collection.context == {"a": 1}


def test_repr_names_the_item_decorator():
    assert repr(ProductsDecorator([])) == "<ProductsDecorator of ProductDecorator for []>"
    assert repr(CollectionDecorator([])) == "<CollectionDecorator of inferred decorators for []>"
