"""Order DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views).
Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.accounts.models import AccountRole

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class SelectedLineSerializer(serializers.Serializer):
    line_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, required=False)


class PlaceOrderSerializer(serializers.Serializer):
    """Validates the checkout payload."""

    username = serializers.CharField()
    selected_lines = SelectedLineSerializer(many=True, allow_empty=False)
    payment_method = serializers.CharField()
    shipping_options = serializers.DictField(required=False, default=dict)
    shipping_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, required=False, allow_null=True
    )
    total_price = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False, allow_null=True
    )


class CancelOrderSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, default="", allow_blank=True)
    username = serializers.CharField(required=False, allow_blank=True)


class StaffCancelOrderSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, default="", allow_blank=True)
    staff_username = serializers.CharField(required=False, default="", allow_blank=True)
    role = serializers.ChoiceField(
        choices=[AccountRole.STAFF, AccountRole.ADMIN],
        required=False,
        default=AccountRole.STAFF,
    )


class MarkReceivedSerializer(serializers.Serializer):
    line_id = serializers.UUIDField()
    staff_username = serializers.CharField(required=False, default="", allow_blank=True)
    received_date = serializers.DateField(required=False, allow_null=True)
    role = serializers.ChoiceField(
        choices=[AccountRole.STAFF, AccountRole.ADMIN],
        required=False,
        default=AccountRole.STAFF,
    )


class AdvanceSerializer(serializers.Serializer):
    username = serializers.CharField(required=False, allow_blank=True)


class AddToCartSerializer(serializers.Serializer):
    username = serializers.CharField()
    product_id = serializers.CharField()
    staff_username = serializers.CharField(required=False, default="", allow_blank=True)


class UpdateCartLineSerializer(serializers.Serializer):
    username = serializers.CharField()
    quantity = serializers.IntegerField()


class RemoveCartLineSerializer(serializers.Serializer):
    username = serializers.CharField()


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class _LineFieldsSerializer(serializers.Serializer):
    line_id = serializers.UUIDField(source="id", read_only=True)
    state = serializers.CharField(read_only=True)
    username = serializers.CharField(read_only=True)
    staff_username = serializers.CharField(read_only=True)
    product_id = serializers.CharField(read_only=True)
    product_name = serializers.CharField(read_only=True)
    color = serializers.CharField(read_only=True)
    size = serializers.CharField(read_only=True)
    image_url = serializers.CharField(read_only=True)
    unit_price = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)
    quantity = serializers.IntegerField(read_only=True)


class OrderLineSerializer(_LineFieldsSerializer):
    """Read serializer shared by every checked-out partition."""

    order_group_id = serializers.CharField(read_only=True)
    payment_method = serializers.CharField(read_only=True)
    shipping_option = serializers.CharField(read_only=True)
    shipping_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, read_only=True, allow_null=True
    )
    placed_at = serializers.DateTimeField(read_only=True)
    received_at = serializers.DateField(read_only=True, allow_null=True)
    canceled_at = serializers.DateField(read_only=True, allow_null=True)
    canceled_reason = serializers.CharField(read_only=True)


class CartLineSerializer(_LineFieldsSerializer):
    available_quantity = serializers.SerializerMethodField()
    added_at = serializers.DateTimeField(source="created_at", read_only=True)

    def get_available_quantity(self, obj) -> int | None:
        return getattr(obj, "available_quantity", None)
