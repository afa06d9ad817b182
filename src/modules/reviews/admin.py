from django.contrib import admin

from modules.reviews.models import ProductReview


@admin.register(ProductReview)
class ProductReviewAdmin(admin.ModelAdmin):
    list_display = ("product_id", "username", "rating", "created_at")
    list_filter = ("rating",)
    search_fields = ("product_id", "product_name", "username")
