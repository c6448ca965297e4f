from decimal import Decimal

import pytest
from django.template import Context, Template

from tests.veneer_django.fixtures.catalog.decorators import BookDecorator
from tests.veneer_django.fixtures.catalog.models import Author, Book
from tests.fixtures.shop.decorators import SpecificProductDecorator
from tests.fixtures.shop.models import Product


def render(source, **context):
    return Template("{% load veneer_tags %}" + source).render(Context(context))


def test_decorate_filter_uses_the_inferred_decorator():
    book = Book(title="Dune", author=Author(name="Herbert"), price=Decimal("9.99"))

    html = render("{% with b=book|decorate %}{{ b.title }} {{ b.display_price }}{% endwith %}", book=book)

    assert html == "DUNE 9.99"


def test_decorate_filter_with_an_explicit_decorator():
    html = render(
        '{% with p=product|decorate:"tests.fixtures.shop.decorators.SpecificProductDecorator" %}'
        "{{ p.awesome_title }}{% endwith %}",
        product=Product(title="Chair"),
    )

    assert html == "Awesome Chair"


def test_decorate_filter_leaves_decorators_alone():
    from veneer_django.templatetags.veneer_tags import decorate_filter

    decorated = SpecificProductDecorator(Product())

    assert decorate_filter(decorated) is decorated
    assert decorate_filter(None) is None


@pytest.mark.django_db
def test_decorate_collection_filter():
    author = Author.objects.create(name="Herbert")
    Book.objects.create(title="Dune", author=author)
    Book.objects.create(title="Messiah", author=author)

    html = render(
        "{% for b in books|decorate_collection %}{{ b.title }};{% endfor %}",
        books=Book.objects.all(),
    )

    assert html == "DUNE;MESSIAH;"


def test_decorate_collection_filter_with_an_explicit_decorator():
    from veneer_django.templatetags.veneer_tags import decorate_collection_filter

    collection = decorate_collection_filter(
        [Book(title="x")], "tests.veneer_django.fixtures.catalog.decorators.BookDecorator"
    )

    assert type(collection[0]) is BookDecorator
