"""Order line partitions.

Each lifecycle state is its own table rather than a status column:

- ``CartLine``        -> ``cart_lines``
- ``PlacedLine``      -> ``placed_lines``
- ``ToReceiveLine``   -> ``to_receive_lines``
- ``ReceivedLine``    -> ``received_lines``
- ``CanceledLine``    -> ``canceled_lines``

A transition copies the row (same primary key) into the destination table
and deletes it from the source, so a line id identifies one purchase across
its whole life and lives in exactly one table at a time.

Business rules implemented:
- Product name/colour/size/image are snapshotted onto the line; later
  catalog edits never reach existing lines.
- ``quantity`` is at least 1.
- Lines created by one checkout share an ``order_group_id``.
"""

from __future__ import annotations

import secrets
from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.orders.constants import (
    DEFAULT_SHIPPING_OPTION,
    ORDER_GROUP_ID_ALPHABET,
    ORDER_GROUP_ID_LENGTH,
    LineState,
)


class ProductSnapshotFields(models.Model):
    """Columns shared by every partition, cart included."""

    username = models.CharField(max_length=150, db_index=True)
    staff_username = models.CharField(max_length=150, blank=True, default="")
    product_id = models.CharField(max_length=64)
    product_name = models.CharField(max_length=255)
    color = models.CharField(max_length=64, blank=True, default="")
    size = models.CharField(max_length=32, blank=True, default="")
    image_url = models.CharField(max_length=500, blank=True, default="")
    unit_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    quantity = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
    )

    STATE: str = ""

    class Meta:
        abstract = True

    @property
    def state(self) -> str:
        return self.STATE

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity


class CartLine(BaseModel, ProductSnapshotFields):
    """A product waiting in a customer's cart."""

    STATE = LineState.CART

    class Meta:
        db_table = "cart_lines"
        ordering = ["created_at", "id"]

    def __str__(self) -> str:
        return f"{self.username}: {self.product_name} x{self.quantity}"


class OrderLine(BaseModel, ProductSnapshotFields):
    """A checked-out line.  Concrete subclasses are the partitions."""

    order_group_id = models.CharField(max_length=32, db_index=True)
    payment_method = models.CharField(max_length=64)
    shipping_option = models.CharField(
        max_length=64, default=DEFAULT_SHIPPING_OPTION
    )
    shipping_price = models.DecimalField(
        max_digits=10, decimal_places=2, null=True, blank=True
    )
    placed_at = models.DateTimeField()
    received_at = models.DateField(null=True, blank=True)
    canceled_at = models.DateField(null=True, blank=True)
    canceled_reason = models.TextField(blank=True, default="")

    class Meta:
        abstract = True
        ordering = ["placed_at", "id"]

    @staticmethod
    def generate_order_group_id() -> str:
        """Random alphanumeric group id.

        Not checked against existing groups; with 62^10 combinations a
        collision is negligible.
        """
        length = getattr(settings, "ORDER_GROUP_ID_LENGTH", ORDER_GROUP_ID_LENGTH)
        return "".join(secrets.choice(ORDER_GROUP_ID_ALPHABET) for _ in range(length))

    def __str__(self) -> str:
        return (
            f"{self.order_group_id}/{self.id} {self.product_name} "
            f"x{self.quantity} ({self.state})"
        )


class PlacedLine(OrderLine):
    STATE = LineState.PLACED

    class Meta(OrderLine.Meta):
        db_table = "placed_lines"


class ToReceiveLine(OrderLine):
    STATE = LineState.TO_RECEIVE

    class Meta(OrderLine.Meta):
        db_table = "to_receive_lines"


class ReceivedLine(OrderLine):
    STATE = LineState.RECEIVED

    class Meta(OrderLine.Meta):
        db_table = "received_lines"


class CanceledLine(OrderLine):
    STATE = LineState.CANCELED

    class Meta(OrderLine.Meta):
        db_table = "canceled_lines"


PARTITION_MODELS: dict[str, type[BaseModel]] = {
    LineState.CART: CartLine,
    LineState.PLACED: PlacedLine,
    LineState.TO_RECEIVE: ToReceiveLine,
    LineState.RECEIVED: ReceivedLine,
    LineState.CANCELED: CanceledLine,
}
