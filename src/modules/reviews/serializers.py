"""Review DRF serializers."""

from __future__ import annotations

from rest_framework import serializers

from modules.reviews.models import ProductReview


class SubmitReviewSerializer(serializers.Serializer):
    line_id = serializers.UUIDField()
    username = serializers.CharField()
    rating = serializers.IntegerField()
    review = serializers.CharField()
    image_url = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class ReviewSerializer(serializers.ModelSerializer):
    class Meta:
        model = ProductReview
        fields = [
            "id",
            "line_id",
            "order_group_id",
            "username",
            "product_id",
            "product_name",
            "rating",
            "review",
            "image_url",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
