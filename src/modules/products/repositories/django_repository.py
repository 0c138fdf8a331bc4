"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
or ``False`` instead of raising HTTP-level exceptions, and the Service
Layer decides how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog

from django.core.exceptions import ValidationError
from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or non-integer IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """List products in insertion order, with optional ORM look-ups.

        Examples of valid filters::

            {"available": True}
            {"name__icontains": "souris"}
        """
        queryset = Product.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info("product.saved", product_id=entity.id, name=entity.name)
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Hard-delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` if no product
        exists with the given ID.
        """
        try:
            deleted, _ = Product.objects.filter(id=id).delete()
        except (ValueError, TypeError, ValidationError):
            return False
        if not deleted:
            return False
        logger.info("product.deleted", product_id=id)
        return True
