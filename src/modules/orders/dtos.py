"""Order DTOs for the Service Layer.

Framework-agnostic, immutable (``frozen=True``) Pydantic v2 contracts
between the DRF serializers and the services.

- ``SelectedLineDTO``: one cart line picked at checkout.
- ``PlaceOrderDTO``: checkout request.
- ``CancelOrderDTO``: customer or staff cancellation.
- ``MarkReceivedDTO``: staff confirmation of delivery for a whole group.
- ``AddToCartDTO`` / ``UpdateCartLineDTO``: cart edits.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from modules.accounts.models import AccountRole

# ---------------------------------------------------------------------------
# Checkout
# ---------------------------------------------------------------------------


class SelectedLineDTO(BaseModel):
    """A cart line to check out.  ``quantity`` overrides the cart quantity."""

    model_config = ConfigDict(frozen=True)

    line_id: UUID
    quantity: Optional[int] = None

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v


class PlaceOrderDTO(BaseModel):
    """Checkout request.

    ``shipping_options`` maps a cart line id to ``"Standard"``, an ISO date,
    or a ``{"shipping_date": ...}`` object.  Lines without an entry ship
    Standard.
    """

    model_config = ConfigDict(frozen=True)

    username: str
    selected_lines: List[SelectedLineDTO]
    payment_method: str
    shipping_options: Dict[str, Any] = {}
    shipping_price: Optional[Decimal] = None
    total_price: Optional[Decimal] = None

    @field_validator("username", "payment_method")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------


class CancelOrderDTO(BaseModel):
    """Cancellation by a customer (from Placed) or staff/admin (from ToReceive)."""

    model_config = ConfigDict(frozen=True)

    line_id: UUID
    reason: str
    actor_role: AccountRole = AccountRole.CUSTOMER
    username: Optional[str] = None
    staff_username: Optional[str] = None

    @field_validator("reason")
    @classmethod
    def strip_reason(cls, v: str) -> str:
        return v.strip()

    @property
    def by_customer(self) -> bool:
        return self.actor_role == AccountRole.CUSTOMER


class MarkReceivedDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    line_id: UUID
    staff_username: str
    received_date: Optional[date] = None
    actor_role: AccountRole = AccountRole.STAFF

    @field_validator("staff_username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        return v.strip()


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------


class AddToCartDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    product_id: str
    staff_username: str = ""


class UpdateCartLineDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    line_id: UUID
    quantity: int
