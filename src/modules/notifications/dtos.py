"""Notification DTOs.

Plain, JSON-serialisable payloads: they cross the Celery boundary, so
every field dumps cleanly with ``model_dump(mode="json")``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class Recipient(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    email: str
    name: str = ""

    @classmethod
    def from_account(cls, account: Optional[Dict[str, Any]]) -> Optional[Recipient]:
        """Build a recipient from an account snapshot; ``None`` without e-mail."""
        if not account or not account.get("email"):
            return None
        return cls(
            username=account.get("username", ""),
            email=account["email"],
            name=account.get("recipient_name") or account.get("username", ""),
        )


class ReceiptItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_name: str
    price: Decimal
    quantity: int
    payment_method: str
    shipping_date: str
