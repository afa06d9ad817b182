"""Inventory ledger service (Use Cases).

Single source of truth for available quantity per product.

Business rules enforced:
- Decrement on order placement is unconditional by default; the
  ``INVENTORY_ALLOW_NEGATIVE_STOCK`` setting turns on a floor at zero.
- Increment on cancellation always succeeds for known products.
- Adjustments are relative deltas, never absolute writes.
- A staff restock increments stock and is audited.
- A delivery set as delivered restocks its product (or creates it) and
  updates the selling price; pending deliveries are never counted as stock.
"""

from __future__ import annotations

import secrets
from typing import TYPE_CHECKING, List, Optional
from uuid import UUID

import structlog
from django.conf import settings
from django.db import transaction
from django.utils import timezone

from modules.accounts.models import AccountRole
from modules.inventory.exceptions import (
    DeliveryNotFound,
    InsufficientStock,
    InvalidStockRequest,
    StockNotFound,
)

if TYPE_CHECKING:
    from modules.audit.services import AuditLog
    from modules.inventory.dtos import AddDeliveryDTO, RestockDTO
    from modules.inventory.models import Delivery, StockRecord
    from modules.inventory.repositories.interfaces import (
        IDeliveryRepository,
        IStockRepository,
    )

logger = structlog.get_logger(__name__)


class InventoryLedger:
    """Application service for stock adjustments.

    ``allow_negative_stock`` defaults to the project setting so the
    coordinator and the API share one policy.
    """

    def __init__(
        self,
        stock_repository: IStockRepository,
        audit_log: Optional[AuditLog] = None,
        allow_negative_stock: Optional[bool] = None,
    ) -> None:
        self._repo = stock_repository
        self._audit = audit_log
        if allow_negative_stock is None:
            allow_negative_stock = getattr(
                settings, "INVENTORY_ALLOW_NEGATIVE_STOCK", True
            )
        self._allow_negative = allow_negative_stock

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def decrement(self, product_id: str, amount: int) -> None:
        """Reserve ``amount`` units of ``product_id``.

        Raises:
            InvalidStockRequest: ``amount`` is not positive.
            InsufficientStock: negative stock is disabled and fewer than
                ``amount`` units are available.
        """
        if amount < 1:
            raise InvalidStockRequest("Quantity must be at least 1.")
        log = logger.bind(product_id=product_id, amount=amount)

        if self._repo.decrement(product_id, amount, allow_negative=self._allow_negative):
            log.info("inventory.decremented")
            return

        if self._repo.get_by_product_id(product_id) is None:
            log.warning("inventory.unknown_product")
            return
        log.warning("inventory.insufficient_stock")
        raise InsufficientStock(
            f"Product {product_id}: requested {amount}, "
            f"available {self._repo.get_quantity(product_id)}."
        )

    def increment(self, product_id: str, amount: int) -> None:
        """Return ``amount`` units of ``product_id`` to stock."""
        if amount < 1:
            raise InvalidStockRequest("Quantity must be at least 1.")
        log = logger.bind(product_id=product_id, amount=amount)
        if self._repo.increment(product_id, amount):
            log.info("inventory.incremented")
        else:
            log.warning("inventory.unknown_product")

    @transaction.atomic
    def restock(self, dto: RestockDTO) -> StockRecord:
        """Add delivered units to an existing product.

        Raises:
            InvalidStockRequest: quantity below 1 or no staff username.
            StockNotFound: the product has no ledger row.
        """
        if dto.quantity < 1:
            raise InvalidStockRequest("Quantity must be at least 1.")
        if not dto.staff_username:
            raise InvalidStockRequest("Staff username is required.")

        stock = self.get_stock(dto.product_id)
        self._repo.increment(stock.product_id, dto.quantity)
        logger.info(
            "inventory.restocked",
            product_id=stock.product_id,
            quantity=dto.quantity,
            staff=dto.staff_username,
        )

        if self._audit is not None:
            self._audit.append(
                actor_username=dto.staff_username,
                actor_role=AccountRole.STAFF,
                action="Staff Restock a Product",
                affected_id=stock.product_id,
            )
        return self.get_stock(stock.product_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_quantity(self, product_id: str) -> int:
        """Available quantity; unknown products resolve to ``0``."""
        return self._repo.get_quantity(product_id)

    def get_stock(self, product_id: str) -> StockRecord:
        """Raises ``StockNotFound`` when the product has no ledger row."""
        stock = self._repo.get_by_product_id(product_id)
        if stock is None:
            raise StockNotFound(f"Product {product_id} not found.")
        return stock


class DeliveryService:
    """Supplier deliveries: intake by staff, then receipt into stock."""

    def __init__(
        self,
        delivery_repository: IDeliveryRepository,
        stock_repository: IStockRepository,
        ledger: InventoryLedger,
        audit_log: Optional[AuditLog] = None,
    ) -> None:
        self._deliveries = delivery_repository
        self._stock = stock_repository
        self._ledger = ledger
        self._audit = audit_log

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def add_delivery(self, dto: AddDeliveryDTO) -> Delivery:
        """Log a pending delivery.

        Raises:
            InvalidStockRequest: missing product or supplier name, a
                non-positive price, or a quantity below 1.
        """
        if not dto.product_name or not dto.supplier_name:
            raise InvalidStockRequest("Missing required fields.")
        if dto.supplier_price <= 0 or dto.shop_price <= 0:
            raise InvalidStockRequest("Prices must be greater than zero.")
        if dto.quantity < 1:
            raise InvalidStockRequest("Quantity must be at least 1.")

        total_cost = dto.total_cost
        if total_cost is None:
            total_cost = dto.supplier_price * dto.quantity

        delivery = self._deliveries.create(
            {
                "product_id": dto.product_id or self.generate_product_id(),
                "product_name": dto.product_name,
                "color": dto.color,
                "size": dto.size,
                "image_url": dto.image_url,
                "supplier_name": dto.supplier_name,
                "supplier_price": dto.supplier_price,
                "shop_price": dto.shop_price,
                "quantity": dto.quantity,
                "total_cost": total_cost,
                "staff_username": dto.staff_username,
            }
        )
        logger.info(
            "delivery.added",
            delivery_id=str(delivery.id),
            product_id=delivery.product_id,
            quantity=delivery.quantity,
        )

        if self._audit is not None:
            self._audit.append(
                actor_username=dto.staff_username,
                actor_role=AccountRole.STAFF,
                action="Staff Added New Delivery Products",
                affected_id=None,
            )
        return delivery

    @transaction.atomic
    def set_as_delivered(
        self,
        delivery_id: UUID,
        staff_username: str,
        actor_role: str = AccountRole.STAFF,
    ) -> Delivery:
        """Receive one pending delivery into stock.

        Raises:
            InvalidStockRequest: no staff username.
            DeliveryNotFound: the delivery is unknown or already delivered.
        """
        staff_username = (staff_username or "").strip()
        if not staff_username:
            raise InvalidStockRequest("Staff username is required.")

        delivery = self._deliveries.get_pending_for_update(delivery_id)
        if delivery is None:
            raise DeliveryNotFound()

        delivered = self._receive(delivery, staff_username)
        if self._audit is not None:
            self._audit.append(
                actor_username=staff_username,
                actor_role=actor_role,
                action=f"{actor_role} Set a Delivered Product",
                affected_id=delivery.product_id,
            )
        return delivered

    @transaction.atomic
    def set_all_delivered(
        self,
        staff_username: str,
        actor_role: str = AccountRole.STAFF,
    ) -> List[Delivery]:
        """Receive every pending delivery into stock.

        Raises:
            InvalidStockRequest: no staff username.
        """
        staff_username = (staff_username or "").strip()
        if not staff_username:
            raise InvalidStockRequest("Staff username is required.")

        delivered = [
            self._receive(delivery, staff_username)
            for delivery in self._deliveries.list_pending(for_update=True)
        ]
        if delivered and self._audit is not None:
            self._audit.append(
                actor_username=staff_username,
                actor_role=actor_role,
                action=f"{actor_role} Set All Deliveries as Delivered",
                affected_id=None,
            )
        logger.info("delivery.all_delivered", count=len(delivered), staff=staff_username)
        return delivered

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_pending(self) -> List[Delivery]:
        return self._deliveries.list_pending()

    def list_history(self) -> List[Delivery]:
        return self._deliveries.list_delivered()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def generate_product_id() -> str:
        """Eight upper-case hex characters."""
        return secrets.token_hex(4).upper()

    def _receive(self, delivery: Delivery, staff_username: str) -> Delivery:
        log = logger.bind(
            delivery_id=str(delivery.id),
            product_id=delivery.product_id,
            quantity=delivery.quantity,
        )
        if self._stock.get_by_product_id(delivery.product_id) is not None:
            self._stock.update_shop_price(delivery.product_id, delivery.shop_price)
            self._ledger.increment(delivery.product_id, delivery.quantity)
            log.info("delivery.restocked")
        else:
            self._stock.create(
                {
                    "product_id": delivery.product_id,
                    "product_name": delivery.product_name,
                    "color": delivery.color,
                    "size": delivery.size,
                    "image_url": delivery.image_url,
                    "shop_price": delivery.shop_price,
                    "quantity": delivery.quantity,
                }
            )
            log.info("delivery.stocked_new_product")
        return self._deliveries.mark_delivered(delivery, staff_username, timezone.now())
