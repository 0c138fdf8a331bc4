"""Product DRF serializers for API output.

The serializer operates at the Interface layer (API Views).  Input is
parsed into Pydantic DTOs from ``dtos.py`` instead.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = ["id", "name", "price", "available"]
        read_only_fields = ["id"]
