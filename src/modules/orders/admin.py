from django.contrib import admin

from modules.orders.models import (
    CanceledLine,
    CartLine,
    PlacedLine,
    ReceivedLine,
    ToReceiveLine,
)


@admin.register(CartLine)
class CartLineAdmin(admin.ModelAdmin):
    list_display = ("id", "username", "product_name", "quantity", "unit_price")
    search_fields = ("username", "product_id", "product_name")


class OrderLineAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "order_group_id",
        "username",
        "product_name",
        "quantity",
        "shipping_option",
        "placed_at",
    )
    list_filter = ("payment_method",)
    search_fields = ("order_group_id", "username", "product_id")
    readonly_fields = ("id", "order_group_id", "placed_at")


admin.site.register(PlacedLine, OrderLineAdmin)
admin.site.register(ToReceiveLine, OrderLineAdmin)
admin.site.register(ReceivedLine, OrderLineAdmin)
admin.site.register(CanceledLine, OrderLineAdmin)
