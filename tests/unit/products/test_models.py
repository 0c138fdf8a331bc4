"""Unit tests for the Product model.

Covers:
- Creation assigns an integer id.
- ``available`` default.
- Insertion ordering.
- __str__ representation.
"""

from __future__ import annotations

import pytest

from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestProductCreation:
    def test_create_assigns_integer_id(self):
        product = Product.objects.create(name="ordinateur", price=5000, available=True)
        assert isinstance(product.id, int)
        assert product.id > 0

    def test_unsaved_product_has_no_id(self):
        product = Product(name="ordinateur", price=5000)
        assert product.id is None

    def test_available_defaults_to_true(self):
        product = Product.objects.create(name="souris", price=250)
        product.refresh_from_db()
        assert product.available is True

    def test_ids_are_unique(self):
        a = Product.objects.create(name="a", price=1)
        b = Product.objects.create(name="b", price=2)
        assert a.id != b.id

    def test_price_stored_as_float(self):
        product = Product.objects.create(name="clavier", price=500)
        product.refresh_from_db()
        assert product.price == 500.0
        assert isinstance(product.price, float)


class TestProductOrdering:
    def test_default_ordering_is_insertion_order(self):
        names = ["tablette", "clavier", "ordinateur"]
        for name in names:
            Product.objects.create(name=name, price=10)
        assert [p.name for p in Product.objects.all()] == names


class TestProductStr:
    def test_str_lists_all_fields(self):
        product = Product.objects.create(name="souris", price=250, available=False)
        product.refresh_from_db()
        assert str(product) == (
            f"Product(id={product.id}, name='souris', price=250.0, available=False)"
        )
