"""Product service layer (Use Cases).

Orchestrates the Product use-cases, delegating persistence to the
injected ``IProductRepository``.  The service adds no business rule of
its own: it turns a missing product into ``ProductNotFound`` and wraps
commands in a transaction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.products.exceptions import ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def add_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product; the store assigns its id."""
        product = Product(name=dto.name, price=dto.price, available=dto.available)
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.id, name=product.name)
        return product

    @transaction.atomic
    def update_product_by_id(self, id: int, dto: UpdateProductDTO) -> Product:
        """Overwrite name, price and availability of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")

        product.name = dto.name
        product.price = dto.price
        product.available = dto.available

        product = self._repo.save(product)
        logger.info("product.updated", product_id=product.id)
        return product

    @transaction.atomic
    def delete_by_id(self, id: int) -> None:
        """Delete a product.  Deleting an unknown id is a no-op."""
        if self._repo.delete(id):
            logger.info("product.removed", product_id=id)
        else:
            logger.info("product.delete_skipped", product_id=id, reason="not_found")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_all(self) -> List[Product]:
        """Return every product."""
        return self._repo.list()

    def find_by_id(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.retrieved", product_id=id)
        return product
