"""Generic repository interfaces (Dependency Inversion Principle).

Service-layer code depends on these abstractions, never on the Django ORM
directly, so every service can be exercised against an in-memory fake.

``IReadRepository[T]`` is the look-up contract every repository extends.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


class IReadRepository(ABC, Generic[T]):
    """Base read-only repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``AuditEntry``, ``StockRecord``).
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> Iterable[T]:
        """List entities with optional filters."""
