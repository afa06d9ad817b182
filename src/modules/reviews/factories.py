"""Wiring of the review service with its Django collaborators."""

from __future__ import annotations

from modules.accounts.repositories.django_repository import AccountDjangoDirectory
from modules.orders.repositories.django_repository import OrderLineDjangoStore
from modules.reviews.repositories.django_repository import ReviewDjangoRepository
from modules.reviews.services import ReviewService


def build_review_service() -> ReviewService:
    return ReviewService(
        review_repository=ReviewDjangoRepository(),
        line_store=OrderLineDjangoStore(),
        account_directory=AccountDjangoDirectory(),
    )
