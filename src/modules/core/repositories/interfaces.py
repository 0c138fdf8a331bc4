"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the
    repository (e.g. ``Product``).  Identifiers are integers assigned
    by the store on first save.
    """

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key, ``None`` when absent."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[T]:
        """List entities with optional filters."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity.

        An entity without an ``id`` is created and receives a new one.
        """

    @abstractmethod
    def delete(self, id: int) -> bool:
        """Remove an entity by ID.

        Returns ``False`` instead of raising when nothing matched.
        """
