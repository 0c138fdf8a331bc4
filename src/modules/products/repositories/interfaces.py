"""Product repository interface.

Narrows ``IRepository`` to the Product entity.  Two implementations
exist: ``ProductDjangoRepository`` (SQL table through the ORM) and
``ProductInMemoryRepository`` (a dict, for tests and throwaway runs).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity."""
