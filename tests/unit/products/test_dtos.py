"""Unit tests for Product DTOs.

Covers:
- CreateProductDTO: defaults, coercion, required fields, immutability.
- UpdateProductDTO: every field required.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.products.dtos import CreateProductDTO, UpdateProductDTO

pytestmark = pytest.mark.unit


# ===========================================================================
# CreateProductDTO
# ===========================================================================


class TestCreateProductDTO:
    def test_create_with_valid_data(self):
        dto = CreateProductDTO(name="ordinateur", price=5000, available=True)
        assert dto.name == "ordinateur"
        assert dto.price == 5000.0
        assert dto.available is True

    def test_available_defaults_to_true(self):
        dto = CreateProductDTO(name="souris", price=250)
        assert dto.available is True

    def test_price_coerced_from_numeric_string(self):
        dto = CreateProductDTO(name="souris", price="249.5")
        assert dto.price == 249.5

    def test_missing_name_rejected(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(price=10)

    def test_none_price_rejected(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="souris", price=None)

    def test_non_numeric_price_rejected(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="souris", price="cheap")

    def test_is_frozen(self):
        dto = CreateProductDTO(name="souris", price=250)
        with pytest.raises(ValidationError):
            dto.name = "clavier"


# ===========================================================================
# UpdateProductDTO
# ===========================================================================


class TestUpdateProductDTO:
    def test_update_with_all_fields(self):
        dto = UpdateProductDTO(name="tablette", price=2800, available=True)
        assert dto.name == "tablette"
        assert dto.price == 2800.0
        assert dto.available is True

    @pytest.mark.parametrize("missing", ["name", "price", "available"])
    def test_every_field_is_required(self, missing):
        payload = {"name": "tablette", "price": 2800, "available": False}
        del payload[missing]
        with pytest.raises(ValidationError):
            UpdateProductDTO(**payload)


# ===========================================================================
# Field limits
# ===========================================================================


class TestFieldLimits:
    @pytest.mark.parametrize("price", [float("inf"), float("-inf"), float("nan"), "NaN", "inf"])
    def test_create_rejects_non_finite_price(self, price):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="souris", price=price)

    @pytest.mark.parametrize("price", [float("inf"), "NaN", "-Infinity"])
    def test_update_rejects_non_finite_price(self, price):
        with pytest.raises(ValidationError):
            UpdateProductDTO(name="souris", price=price, available=True)

    def test_name_of_255_characters_accepted(self):
        dto = CreateProductDTO(name="x" * 255, price=1)
        assert len(dto.name) == 255

    def test_create_rejects_name_over_255_characters(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="x" * 256, price=1)

    def test_update_rejects_name_over_255_characters(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO(name="x" * 256, price=1, available=True)
