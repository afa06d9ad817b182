"""Periodic order tasks."""

from __future__ import annotations

import structlog
from celery import shared_task

logger = structlog.get_logger(__name__)


@shared_task(name="orders.advance_placed_orders")
def advance_placed_orders() -> int:
    """Move every due Placed line of every customer to ToReceive."""
    from modules.orders.factories import build_order_service

    moved = build_order_service().advance_to_receivable()
    logger.info("order.advance_task_completed", moved=len(moved))
    return len(moved)
