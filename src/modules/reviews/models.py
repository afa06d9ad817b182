"""Product review left by a customer on a received order line.

One review per order line.  The product columns are copied from the line
so a review still reads correctly after the catalog changes.
"""

from __future__ import annotations

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from modules.core.models import BaseModel

MIN_RATING = 1
MAX_RATING = 5


class ProductReview(BaseModel):
    line_id = models.UUIDField(unique=True)
    order_group_id = models.CharField(max_length=32, blank=True, default="")
    username = models.CharField(max_length=150, db_index=True)
    product_id = models.CharField(max_length=64, db_index=True)
    product_name = models.CharField(max_length=255)
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(MIN_RATING), MaxValueValidator(MAX_RATING)]
    )
    review = models.TextField()
    image_url = models.CharField(max_length=500, blank=True, default="")
    actor_snapshot = models.JSONField(default=dict, blank=True)

    class Meta:
        db_table = "product_reviews"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.username} rated {self.product_id} {self.rating}/5"
