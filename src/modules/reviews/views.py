"""Product review endpoints.

Customers review the lines they received; anyone signed in can read the
reviews of a product.
"""

from __future__ import annotations

from uuid import UUID

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.reviews.dtos import SubmitReviewDTO, UpdateReviewDTO
from modules.reviews.factories import build_review_service
from modules.reviews.serializers import ReviewSerializer, SubmitReviewSerializer


class ReviewView(APIView):
    """POST/PUT /api/v1/reviews/"""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = build_review_service()

    def post(self, request: Request) -> Response:
        serializer = SubmitReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        review = self._service.submit_review(SubmitReviewDTO(**serializer.validated_data))
        return Response(
            {"message": "Review submitted successfully!", "review": ReviewSerializer(review).data},
            status=status.HTTP_201_CREATED,
        )

    def put(self, request: Request) -> Response:
        serializer = SubmitReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        review = self._service.update_review(UpdateReviewDTO(**serializer.validated_data))
        return Response(
            {"message": "Review updated successfully!", "review": ReviewSerializer(review).data}
        )


class LineReviewView(APIView):
    """GET /api/v1/reviews/{line_id}/{username}/"""

    def get(self, request: Request, line_id: UUID, username: str) -> Response:
        review = build_review_service().get_review(line_id, username)
        if review is None:
            return Response({"has_reviewed": False})
        return Response(
            {
                "has_reviewed": True,
                "review": {
                    "rating": review.rating,
                    "review": review.review,
                    "image_url": review.image_url or None,
                },
            }
        )


class ProductReviewsView(APIView):
    """GET /api/v1/reviews/product/{product_id}/"""

    def get(self, request: Request, product_id: str) -> Response:
        reviews = build_review_service().list_by_product(product_id)
        return Response(ReviewSerializer(reviews, many=True).data)
