"""Inventory repository interfaces.

``IStockRepository`` is the ledger contract.  Quantity changes are expressed
as relative deltas (never read-then-write of an absolute value) so that two
concurrent adjustments of the same product cannot lose an update.

``IProductCatalog`` is the read-only product look-up the order pipeline
uses to snapshot product data into order lines.

``IDeliveryRepository`` holds supplier shipments, pending and delivered.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from modules.core.repositories.interfaces import IReadRepository

if TYPE_CHECKING:
    from modules.inventory.dtos import ProductSnapshot
    from modules.inventory.models import Delivery, StockRecord


class IStockRepository(IReadRepository["StockRecord"]):
    """Repository contract for per-product stock."""

    @abstractmethod
    def get_by_product_id(self, product_id: str) -> Optional[StockRecord]:
        """Retrieve the ledger row of a product."""

    @abstractmethod
    def get_quantity(self, product_id: str) -> int:
        """Available quantity; ``0`` when the product is unknown."""

    @abstractmethod
    def increment(self, product_id: str, amount: int) -> bool:
        """Add ``amount``.  Returns ``False`` when no row matched."""

    @abstractmethod
    def decrement(
        self, product_id: str, amount: int, allow_negative: bool = True
    ) -> bool:
        """Subtract ``amount``.

        With ``allow_negative=False`` the row only matches when at least
        ``amount`` is available.  Returns ``False`` when no row matched.
        """

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> StockRecord:
        """Insert the ledger row of a new product."""

    @abstractmethod
    def update_shop_price(self, product_id: str, price: Decimal) -> bool:
        """Set the selling price.  Returns ``False`` when no row matched."""


class IProductCatalog(ABC):
    """Read-only product catalog."""

    @abstractmethod
    def get_product(self, product_id: str) -> Optional[ProductSnapshot]:
        """Point-in-time product snapshot, or ``None`` when unknown."""


class IDeliveryRepository(IReadRepository["Delivery"]):
    """Repository contract for supplier deliveries."""

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Delivery:
        """Persist a new pending delivery."""

    @abstractmethod
    def get_pending_for_update(self, delivery_id: Any) -> Optional[Delivery]:
        """Lock and return a pending delivery, or ``None``."""

    @abstractmethod
    def list_pending(self, for_update: bool = False) -> List[Delivery]:
        """Pending deliveries, newest first."""

    @abstractmethod
    def list_delivered(self) -> List[Delivery]:
        """Delivery history, most recently delivered first."""

    @abstractmethod
    def mark_delivered(
        self, delivery: Delivery, delivered_by: str, delivered_at: datetime
    ) -> Delivery:
        """Stamp a delivery as delivered."""
