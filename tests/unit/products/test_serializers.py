"""Unit tests for the Product DRF serializer."""

from __future__ import annotations

import pytest

from modules.products.models import Product
from modules.products.serializers import ProductSerializer

pytestmark = pytest.mark.unit


class TestSerializerFields:
    def test_expected_fields(self):
        serializer = ProductSerializer()
        assert set(serializer.fields.keys()) == {"id", "name", "price", "available"}

    def test_id_is_read_only(self):
        serializer = ProductSerializer()
        assert serializer.fields["id"].read_only is True


class TestSerialization:
    def test_serializes_product(self, make_product):
        product = make_product(name="tablette", price=3000, available=False)
        data = ProductSerializer(product).data
        assert data == {
            "id": product.id,
            "name": "tablette",
            "price": 3000.0,
            "available": False,
        }

    def test_serializes_unsaved_product_with_null_id(self):
        data = ProductSerializer(Product(name="souris", price=250)).data
        assert data["id"] is None
