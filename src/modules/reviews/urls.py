"""Review URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.reviews.views import LineReviewView, ProductReviewsView, ReviewView

urlpatterns = [
    path("reviews/", ReviewView.as_view(), name="reviews"),
    path(
        "reviews/product/<str:product_id>/",
        ProductReviewsView.as_view(),
        name="product-reviews",
    ),
    path(
        "reviews/<uuid:line_id>/<str:username>/",
        LineReviewView.as_view(),
        name="line-review",
    ),
]
