from django.contrib import admin

from modules.inventory.models import Delivery, StockRecord


@admin.register(StockRecord)
class StockRecordAdmin(admin.ModelAdmin):
    list_display = ("product_id", "product_name", "shop_price", "quantity")
    search_fields = ("product_id", "product_name")


@admin.register(Delivery)
class DeliveryAdmin(admin.ModelAdmin):
    list_display = (
        "product_id",
        "product_name",
        "supplier_name",
        "quantity",
        "created_at",
        "delivered_at",
    )
    list_filter = ("supplier_name",)
    search_fields = ("product_id", "product_name", "supplier_name")
