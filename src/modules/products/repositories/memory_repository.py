"""In-memory implementation of the Product repository.

Keeps products in a dict keyed by id; nothing touches the database.
Ids come from a counter starting at 1, so they are unique for the
lifetime of the repository even after deletions.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, List, Optional

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductInMemoryRepository(IProductRepository):

    def __init__(self, products: Optional[List[Product]] = None) -> None:
        self._store: Dict[int, Product] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        for product in products or []:
            self.save(product)

    def get_by_id(self, id: int) -> Optional[Product]:
        try:
            key = int(id)
        except (TypeError, ValueError):
            return None
        with self._lock:
            return self._store.get(key)

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """Return products ordered by id; ``filters`` match by equality."""
        with self._lock:
            products = [self._store[key] for key in sorted(self._store)]
        if filters:
            products = [
                p
                for p in products
                if all(getattr(p, field) == value for field, value in filters.items())
            ]
        return products

    def save(self, entity: Product) -> Product:
        with self._lock:
            if entity.id is None:
                entity.id = self._next_id
                self._next_id += 1
            else:
                self._next_id = max(self._next_id, entity.id + 1)
            self._store[entity.id] = entity
        return entity

    def delete(self, id: int) -> bool:
        try:
            key = int(id)
        except (TypeError, ValueError):
            return False
        with self._lock:
            return self._store.pop(key, None) is not None
