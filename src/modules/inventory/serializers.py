"""Inventory DRF serializers."""

from __future__ import annotations

from rest_framework import serializers

from modules.accounts.models import AccountRole
from modules.inventory.models import Delivery, StockRecord


class RestockSerializer(serializers.Serializer):
    quantity = serializers.IntegerField(min_value=1)
    staff_username = serializers.CharField()


class StockSerializer(serializers.ModelSerializer):
    class Meta:
        model = StockRecord
        fields = [
            "product_id",
            "product_name",
            "color",
            "size",
            "image_url",
            "shop_price",
            "quantity",
            "updated_at",
        ]
        read_only_fields = fields


class AddDeliverySerializer(serializers.Serializer):
    product_id = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    product_name = serializers.CharField()
    color = serializers.CharField(required=False, default="", allow_blank=True)
    size = serializers.CharField(required=False, default="", allow_blank=True)
    image_url = serializers.CharField(required=False, default="", allow_blank=True)
    supplier_name = serializers.CharField()
    supplier_price = serializers.DecimalField(max_digits=10, decimal_places=2)
    shop_price = serializers.DecimalField(max_digits=10, decimal_places=2)
    quantity = serializers.IntegerField()
    total_cost = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False, allow_null=True
    )
    staff_username = serializers.CharField(required=False, default="", allow_blank=True)


class DeliverSerializer(serializers.Serializer):
    staff_username = serializers.CharField(required=False, default="", allow_blank=True)
    role = serializers.ChoiceField(
        choices=[AccountRole.STAFF, AccountRole.ADMIN],
        required=False,
        default=AccountRole.STAFF,
    )


class DeliverySerializer(serializers.ModelSerializer):
    class Meta:
        model = Delivery
        fields = [
            "id",
            "product_id",
            "product_name",
            "color",
            "size",
            "image_url",
            "supplier_name",
            "supplier_price",
            "shop_price",
            "quantity",
            "total_cost",
            "staff_username",
            "created_at",
            "delivered_at",
            "delivered_by",
        ]
        read_only_fields = fields
