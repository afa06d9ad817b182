"""Order line store interface.

One store owns all five partitions (Cart, Placed, ToReceive, Received,
Canceled).  A line lives in exactly one partition; ``move`` relocates lines
keeping their ids and must be atomic: either every line lands in the
destination and leaves its source, or nothing changes.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional
from uuid import UUID

if TYPE_CHECKING:
    from modules.orders.models import CartLine, OrderLine


class IOrderLineStore(ABC):
    """Repository contract for the order line partitions."""

    # -- reads -------------------------------------------------------------

    @abstractmethod
    def get(self, state: str, line_id: UUID) -> Optional[Any]:
        """Line ``line_id`` if it currently lives in ``state``."""

    @abstractmethod
    def get_for_update(self, state: str, line_id: UUID) -> Optional[Any]:
        """Like ``get`` but row-locked until the transaction ends."""

    @abstractmethod
    def list(
        self,
        state: str,
        username: Optional[str] = None,
        for_update: bool = False,
    ) -> List[Any]:
        """Lines of a partition, optionally restricted to one customer."""

    @abstractmethod
    def list_group(
        self, state: str, order_group_id: str, for_update: bool = False
    ) -> List[OrderLine]:
        """Lines of ``state`` sharing ``order_group_id``."""

    # -- writes ------------------------------------------------------------

    @abstractmethod
    def insert(self, state: str, data: Dict[str, Any]) -> Any:
        """Write a new line into ``state``."""

    @abstractmethod
    def delete(self, state: str, line_ids: Iterable[UUID]) -> int:
        """Remove lines from ``state``; returns how many were removed."""

    @abstractmethod
    def move(
        self,
        lines: List[Any],
        destination: str,
        changes: Optional[Dict[str, Any]] = None,
    ) -> List[OrderLine]:
        """Relocate ``lines`` to ``destination`` applying ``changes``.

        Ids are preserved.  Lines are removed from the partition they were
        read from (``line.state``).
        """

    # -- cart --------------------------------------------------------------

    @abstractmethod
    def find_cart_line(
        self, username: str, product_id: str, for_update: bool = False
    ) -> Optional[CartLine]:
        """The customer's cart line for ``product_id``, if any."""

    @abstractmethod
    def update_cart_quantity(self, line_id: UUID, quantity: int) -> Optional[CartLine]:
        """Set a cart line's quantity; ``None`` when the line is gone."""
