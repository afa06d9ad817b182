"""Django ORM implementation of the inventory repositories.

Ledger adjustments use ``F()`` expressions so the database applies the
delta atomically per row; no ``SELECT`` precedes the ``UPDATE``.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db.models import F
from django.utils import timezone

from modules.inventory.dtos import ProductSnapshot
from modules.inventory.models import Delivery, StockRecord
from modules.inventory.repositories.interfaces import (
    IDeliveryRepository,
    IProductCatalog,
    IStockRepository,
)

logger = structlog.get_logger(__name__)


class StockDjangoRepository(IStockRepository):
    """Concrete stock ledger backed by the ``stocks`` table."""

    def get_by_id(self, id: str) -> Optional[StockRecord]:
        try:
            return StockRecord.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[StockRecord]:
        queryset = StockRecord.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def get_by_product_id(self, product_id: str) -> Optional[StockRecord]:
        return StockRecord.objects.filter(product_id=product_id).first()

    def get_quantity(self, product_id: str) -> int:
        quantity = (
            StockRecord.objects.filter(product_id=product_id)
            .values_list("quantity", flat=True)
            .first()
        )
        return quantity if quantity is not None else 0

    def increment(self, product_id: str, amount: int) -> bool:
        updated = StockRecord.objects.filter(product_id=product_id).update(
            quantity=F("quantity") + amount,
            updated_at=timezone.now(),
        )
        return updated > 0

    def decrement(
        self, product_id: str, amount: int, allow_negative: bool = True
    ) -> bool:
        queryset = StockRecord.objects.filter(product_id=product_id)
        if not allow_negative:
            queryset = queryset.filter(quantity__gte=amount)
        updated = queryset.update(
            quantity=F("quantity") - amount,
            updated_at=timezone.now(),
        )
        return updated > 0

    def create(self, data: Dict[str, Any]) -> StockRecord:
        return StockRecord.objects.create(**data)

    def update_shop_price(self, product_id: str, price: Decimal) -> bool:
        updated = StockRecord.objects.filter(product_id=product_id).update(
            shop_price=price,
            updated_at=timezone.now(),
        )
        return updated > 0


class StockDjangoCatalog(IProductCatalog):
    """Product catalog view over the stock table."""

    def get_product(self, product_id: str) -> Optional[ProductSnapshot]:
        stock = StockRecord.objects.filter(product_id=product_id).first()
        if stock is None:
            logger.info("catalog.product_missing", product_id=product_id)
            return None
        return ProductSnapshot.from_entity(stock)


class DeliveryDjangoRepository(IDeliveryRepository):
    """Supplier deliveries backed by the ``deliveries`` table."""

    def get_by_id(self, id: str) -> Optional[Delivery]:
        try:
            return Delivery.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Delivery]:
        queryset = Delivery.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def create(self, data: Dict[str, Any]) -> Delivery:
        return Delivery.objects.create(**data)

    def get_pending_for_update(self, delivery_id: Any) -> Optional[Delivery]:
        try:
            return (
                Delivery.objects.select_for_update()
                .filter(id=delivery_id, delivered_at__isnull=True)
                .first()
            )
        except (ValueError, ValidationError):
            return None

    def list_pending(self, for_update: bool = False) -> List[Delivery]:
        queryset = Delivery.objects.filter(delivered_at__isnull=True)
        if for_update:
            queryset = queryset.select_for_update()
        return list(queryset.order_by("-created_at"))

    def list_delivered(self) -> List[Delivery]:
        return list(
            Delivery.objects.filter(delivered_at__isnull=False).order_by("-delivered_at")
        )

    def mark_delivered(
        self, delivery: Delivery, delivered_by: str, delivered_at: datetime
    ) -> Delivery:
        delivery.delivered_at = delivered_at
        delivery.delivered_by = delivered_by
        delivery.save(update_fields=["delivered_at", "delivered_by", "updated_at"])
        return delivery
