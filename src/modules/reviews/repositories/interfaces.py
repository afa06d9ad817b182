"""Review repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional
from uuid import UUID

from modules.core.repositories.interfaces import IReadRepository

if TYPE_CHECKING:
    from modules.reviews.models import ProductReview


class IReviewRepository(IReadRepository["ProductReview"]):
    @abstractmethod
    def get_for_line(self, line_id: UUID, username: str) -> Optional[ProductReview]:
        """The review ``username`` left on an order line, or ``None``."""

    @abstractmethod
    def exists_for_line(self, line_id: UUID) -> bool:
        """Whether anyone reviewed the line."""

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> ProductReview:
        """Insert a review."""

    @abstractmethod
    def update(self, review: ProductReview, changes: Dict[str, Any]) -> ProductReview:
        """Apply ``changes`` to a review."""

    @abstractmethod
    def list_by_product(self, product_id: str) -> List[ProductReview]:
        """Reviews of one product, newest first."""
