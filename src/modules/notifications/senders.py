"""E-mail notification sender backed by Celery tasks."""

from __future__ import annotations

from decimal import Decimal
from typing import List

import structlog

from modules.notifications.dtos import ReceiptItem, Recipient
from modules.notifications.interfaces import INotificationSender
from modules.notifications.tasks import (
    send_cancellation_email,
    send_order_confirmation_email,
)

logger = structlog.get_logger(__name__)


class EmailNotificationSender(INotificationSender):
    """Queues one e-mail task per notification."""

    def send_order_confirmation(
        self,
        recipient: Recipient,
        items: List[ReceiptItem],
        total: Decimal,
        address: str,
    ) -> None:
        send_order_confirmation_email.delay(
            recipient.model_dump(mode="json"),
            [item.model_dump(mode="json") for item in items],
            str(total),
            address,
        )
        logger.info("notification.order_confirmation_queued", to=recipient.username)

    def send_cancellation_notice(
        self, recipient: Recipient, line_id: str, reason: str
    ) -> None:
        send_cancellation_email.delay(
            recipient.model_dump(mode="json"), line_id, reason
        )
        logger.info("notification.cancellation_queued", to=recipient.username)
