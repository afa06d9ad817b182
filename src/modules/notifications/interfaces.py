"""Notification sender interface.

Senders are fire-and-forget from the caller's point of view: the order
pipeline logs failures and never lets them fail a transition.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from modules.notifications.dtos import ReceiptItem, Recipient


class INotificationSender(ABC):
    @abstractmethod
    def send_order_confirmation(
        self,
        recipient: Recipient,
        items: List[ReceiptItem],
        total: Decimal,
        address: str,
    ) -> None:
        """Send the itemised receipt of a freshly placed order."""

    @abstractmethod
    def send_cancellation_notice(
        self, recipient: Recipient, line_id: str, reason: str
    ) -> None:
        """Tell a customer one of their order lines was canceled."""
