"""Django ORM implementation of the review repository."""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from uuid import UUID

from django.core.exceptions import ValidationError

from modules.reviews.models import ProductReview
from modules.reviews.repositories.interfaces import IReviewRepository


class ReviewDjangoRepository(IReviewRepository):
    def get_by_id(self, id: str) -> Optional[ProductReview]:
        try:
            return ProductReview.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[ProductReview]:
        queryset = ProductReview.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def get_for_line(self, line_id: UUID, username: str) -> Optional[ProductReview]:
        try:
            return ProductReview.objects.filter(line_id=line_id, username=username).first()
        except (ValueError, ValidationError):
            return None

    def exists_for_line(self, line_id: UUID) -> bool:
        return ProductReview.objects.filter(line_id=line_id).exists()

    def create(self, data: Dict[str, Any]) -> ProductReview:
        return ProductReview.objects.create(**data)

    def update(self, review: ProductReview, changes: Dict[str, Any]) -> ProductReview:
        for field, value in changes.items():
            setattr(review, field, value)
        review.save(update_fields=[*changes, "updated_at"])
        return review

    def list_by_product(self, product_id: str) -> List[ProductReview]:
        return list(ProductReview.objects.filter(product_id=product_id).order_by("-created_at"))
