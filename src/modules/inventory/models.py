"""Stock record model: the inventory ledger row for one product.

Business rules implemented:
- ``product_id`` is unique: one ledger row per product.
- ``quantity`` is a *signed* integer.  Stock is decremented unconditionally
  when orders are placed unless ``INVENTORY_ALLOW_NEGATIVE_STOCK`` is
  disabled, so a negative value is a legitimate backorder signal.
- The product snapshot columns double as the read-only catalog consulted
  when an order is placed.

A ``Delivery`` is a supplier shipment staff have logged.  It stays pending
until it is set as delivered, which adds its units to stock; delivered rows
are kept as the delivery history.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class StockRecord(BaseModel):
    """Per-product available quantity plus the product's display data."""

    product_id = models.CharField(max_length=64, unique=True)
    product_name = models.CharField(max_length=255)
    color = models.CharField(max_length=64, blank=True, default="")
    size = models.CharField(max_length=32, blank=True, default="")
    image_url = models.CharField(max_length=500, blank=True, default="")
    shop_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    quantity = models.IntegerField(default=0)

    class Meta:
        db_table = "stocks"
        ordering = ["product_name"]

    def __str__(self) -> str:
        return f"{self.product_id} - {self.product_name} ({self.quantity})"


class Delivery(BaseModel):
    """Supplier shipment of one product; pending while ``delivered_at`` is null."""

    product_id = models.CharField(max_length=64, db_index=True)
    product_name = models.CharField(max_length=255)
    color = models.CharField(max_length=64, blank=True, default="")
    size = models.CharField(max_length=32, blank=True, default="")
    image_url = models.CharField(max_length=500, blank=True, default="")
    supplier_name = models.CharField(max_length=255)
    supplier_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    shop_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    total_cost = models.DecimalField(max_digits=12, decimal_places=2)
    staff_username = models.CharField(max_length=150, blank=True, default="")
    delivered_at = models.DateTimeField(null=True, blank=True)
    delivered_by = models.CharField(max_length=150, blank=True, default="")

    class Meta:
        db_table = "deliveries"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["delivered_at"], name="deliveries_delivered_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.product_id} x{self.quantity} from {self.supplier_name}"

    @property
    def is_pending(self) -> bool:
        return self.delivered_at is None
