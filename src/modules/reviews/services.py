"""Product review service.

Business rules enforced:
- Only the customer who received an order line may review it.
- One review per order line; later changes go through ``update_review``.
- Rating is a whole number from 1 to 5 and the review text is required.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional
from uuid import UUID

import structlog
from django.db import transaction

from modules.orders.constants import LineState
from modules.reviews.exceptions import (
    InvalidReviewRequest,
    ReceivedLineNotFound,
    ReviewAlreadyExists,
    ReviewNotFound,
)
from modules.reviews.models import MAX_RATING, MIN_RATING

if TYPE_CHECKING:
    from modules.accounts.repositories.interfaces import IAccountDirectory
    from modules.orders.repositories.interfaces import IOrderLineStore
    from modules.reviews.dtos import SubmitReviewDTO, UpdateReviewDTO
    from modules.reviews.models import ProductReview
    from modules.reviews.repositories.interfaces import IReviewRepository

logger = structlog.get_logger(__name__)


class ReviewService:
    def __init__(
        self,
        review_repository: IReviewRepository,
        line_store: IOrderLineStore,
        account_directory: IAccountDirectory,
    ) -> None:
        self._repo = review_repository
        self._store = line_store
        self._directory = account_directory

    @transaction.atomic
    def submit_review(self, dto: SubmitReviewDTO) -> ProductReview:
        """Raises ``InvalidReviewRequest``, ``ReceivedLineNotFound`` or
        ``ReviewAlreadyExists``."""
        self._validate(dto)
        line = self._store.get(LineState.RECEIVED, dto.line_id)
        if line is None or line.username != dto.username:
            raise ReceivedLineNotFound()
        if self._repo.exists_for_line(dto.line_id):
            raise ReviewAlreadyExists()

        review = self._repo.create(
            {
                "line_id": line.id,
                "order_group_id": line.order_group_id,
                "username": dto.username,
                "product_id": line.product_id,
                "product_name": line.product_name,
                "rating": dto.rating,
                "review": dto.review,
                "image_url": dto.image_url or "",
                "actor_snapshot": self._directory.find_account_info(dto.username) or {},
            }
        )
        logger.info(
            "review.submitted",
            line_id=str(line.id),
            product_id=line.product_id,
            rating=dto.rating,
        )
        return review

    @transaction.atomic
    def update_review(self, dto: UpdateReviewDTO) -> ProductReview:
        """Raises ``InvalidReviewRequest`` or ``ReviewNotFound``."""
        self._validate(dto)
        review = self._repo.get_for_line(dto.line_id, dto.username)
        if review is None:
            raise ReviewNotFound()

        changes: Dict[str, Any] = {"rating": dto.rating, "review": dto.review}
        if dto.image_url:
            changes["image_url"] = dto.image_url
        review = self._repo.update(review, changes)
        logger.info("review.updated", line_id=str(dto.line_id), rating=dto.rating)
        return review

    def get_review(self, line_id: UUID, username: str) -> Optional[ProductReview]:
        return self._repo.get_for_line(line_id, username)

    def list_by_product(self, product_id: str) -> List[ProductReview]:
        return self._repo.list_by_product(product_id)

    @staticmethod
    def _validate(dto: SubmitReviewDTO) -> None:
        if not dto.username or not dto.review:
            raise InvalidReviewRequest()
        if not MIN_RATING <= dto.rating <= MAX_RATING:
            raise InvalidReviewRequest(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}."
            )
