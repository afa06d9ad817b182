"""Inventory DTOs.

``ProductSnapshot`` is the point-in-time copy of a product that the order
pipeline embeds into every order line.  It is immutable: once taken, later
catalog changes never reach lines that were already placed.

``AddDeliveryDTO`` carries a supplier shipment logged by staff.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from modules.inventory.models import StockRecord


class ProductSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: str
    product_name: str
    color: str = ""
    size: str = ""
    image_url: str = ""
    price: Decimal

    @classmethod
    def from_entity(cls, stock: StockRecord) -> ProductSnapshot:
        return cls(
            product_id=stock.product_id,
            product_name=stock.product_name,
            color=stock.color,
            size=stock.size,
            image_url=stock.image_url,
            price=stock.shop_price,
        )


class RestockDTO(BaseModel):
    """Input for a staff restock of an existing product."""

    model_config = ConfigDict(frozen=True)

    product_id: str
    quantity: int
    staff_username: str

    @field_validator("staff_username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        return v.strip()


class AddDeliveryDTO(BaseModel):
    """Supplier shipment to log as a pending delivery.

    ``product_id`` names an existing product to restock; when omitted a new
    product id is generated.  ``total_cost`` defaults to
    ``supplier_price * quantity``.
    """

    model_config = ConfigDict(frozen=True)

    product_name: str
    supplier_name: str
    supplier_price: Decimal
    shop_price: Decimal
    quantity: int
    product_id: Optional[str] = None
    color: str = ""
    size: str = ""
    image_url: str = ""
    total_cost: Optional[Decimal] = None
    staff_username: str = ""

    @field_validator("product_name", "supplier_name", "staff_username")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()

    @field_validator("product_id")
    @classmethod
    def blank_product_id_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None
