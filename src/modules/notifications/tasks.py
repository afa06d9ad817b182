"""Asynchronous e-mail delivery."""

from __future__ import annotations

from typing import Any, Dict, List

import structlog
from celery import shared_task
from django.conf import settings
from django.core.mail import send_mail

from modules.notifications.receipts import render_cancellation, render_receipt

logger = structlog.get_logger(__name__)


@shared_task(name="notifications.send_order_confirmation")
def send_order_confirmation_email(
    recipient: Dict[str, Any],
    items: List[Dict[str, Any]],
    total: str,
    address: str,
) -> int:
    body = render_receipt(recipient["name"], items, total, address)
    sent = send_mail(
        subject=settings.ORDER_CONFIRMATION_SUBJECT,
        message=body,
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[recipient["email"]],
    )
    logger.info("notification.order_confirmation_sent", to=recipient["username"], sent=sent)
    return sent


@shared_task(name="notifications.send_cancellation_notice")
def send_cancellation_email(
    recipient: Dict[str, Any], line_id: str, reason: str
) -> int:
    body = render_cancellation(recipient["name"], line_id, reason)
    sent = send_mail(
        subject=settings.ORDER_CANCELLATION_SUBJECT,
        message=body,
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[recipient["email"]],
    )
    logger.info("notification.cancellation_sent", to=recipient["username"], sent=sent)
    return sent
