"""Unit tests for receipt rendering and the e-mail sender."""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.core import mail

from modules.notifications.dtos import ReceiptItem, Recipient
from modules.notifications.receipts import render_cancellation, render_receipt
from modules.notifications.senders import EmailNotificationSender

pytestmark = pytest.mark.unit


@pytest.fixture()
def recipient():
    return Recipient(username="alice", email="alice@example.com", name="Alice Reyes")


@pytest.fixture()
def items():
    return [
        ReceiptItem(
            product_name="Basic Tee",
            price=Decimal("299.00"),
            quantity=2,
            payment_method="COD",
            shipping_date="2024-06-10",
        ),
        ReceiptItem(
            product_name="Zip Hoodie",
            price=Decimal("899.00"),
            quantity=1,
            payment_method="COD",
            shipping_date="Standard",
        ),
    ]


class TestRecipient:
    def test_from_account(self):
        recipient = Recipient.from_account(
            {"username": "alice", "email": "alice@example.com", "recipient_name": "Alice R."}
        )

        assert recipient.name == "Alice R."

    def test_name_falls_back_to_username(self):
        recipient = Recipient.from_account({"username": "bob", "email": "bob@example.com"})

        assert recipient.name == "bob"

    @pytest.mark.parametrize("account", [None, {}, {"username": "carla", "email": ""}])
    def test_no_email_no_recipient(self, account):
        assert Recipient.from_account(account) is None


class TestRendering:
    def test_receipt_lists_every_item(self, items):
        body = render_receipt(
            "Alice Reyes",
            [item.model_dump() for item in items],
            Decimal("1497.00"),
            "12 Mango St., Metro Manila",
        )

        assert "Hello Alice Reyes," in body
        assert "Item 1:" in body and "Item 2:" in body
        assert "Product: Zip Hoodie" in body
        assert "Shipping Date: 2024-06-10" in body
        assert "Total Price: 1497.00" in body
        assert "12 Mango St., Metro Manila" in body

    def test_cancellation(self):
        body = render_cancellation("Alice", "abc-123", "changed mind")

        assert "(ID: abc-123)" in body
        assert "Reason: changed mind" in body


class TestEmailNotificationSender:
    def test_order_confirmation_is_mailed(self, settings, recipient, items):
        EmailNotificationSender().send_order_confirmation(
            recipient, items, Decimal("1497.00"), "12 Mango St."
        )

        assert len(mail.outbox) == 1
        message = mail.outbox[0]
        assert message.to == ["alice@example.com"]
        assert message.subject == settings.ORDER_CONFIRMATION_SUBJECT
        assert "Total Price: 1497.00" in message.body

    def test_cancellation_notice_is_mailed(self, settings, recipient):
        EmailNotificationSender().send_cancellation_notice(recipient, "line-1", "out of stock")

        assert len(mail.outbox) == 1
        assert mail.outbox[0].subject == settings.ORDER_CANCELLATION_SUBJECT
        assert "Reason: out of stock" in mail.outbox[0].body
