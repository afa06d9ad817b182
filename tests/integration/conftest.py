"""Shared fixtures for the API integration tests."""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.utils import timezone

from modules.accounts.models import AccountInfo, AccountRole
from modules.inventory.models import StockRecord
from modules.orders.models import CartLine, PlacedLine, ReceivedLine, ToReceiveLine


@pytest.fixture()
def alice():
    return AccountInfo.objects.create(
        username="alice",
        role=AccountRole.CUSTOMER,
        email="alice@example.com",
        recipient_name="Alice Reyes",
        house_street="12 Mango St.",
        region="Metro Manila",
    )


@pytest.fixture()
def tee():
    return StockRecord.objects.create(
        product_id="TEE-BLK-M",
        product_name="Basic Tee",
        color="Black",
        size="M",
        shop_price=Decimal("299.00"),
        quantity=10,
    )


@pytest.fixture()
def hoodie():
    return StockRecord.objects.create(
        product_id="HOOD-GRY-L",
        product_name="Zip Hoodie",
        color="Grey",
        size="L",
        shop_price=Decimal("899.00"),
        quantity=1,
    )


def _cart_line(stock, username="alice", quantity=1):
    return CartLine.objects.create(
        username=username,
        product_id=stock.product_id,
        product_name=stock.product_name,
        color=stock.color,
        size=stock.size,
        unit_price=stock.shop_price,
        quantity=quantity,
    )


@pytest.fixture()
def tee_in_cart(alice, tee):
    return _cart_line(tee, quantity=2)


@pytest.fixture()
def hoodie_in_cart(alice, hoodie):
    return _cart_line(hoodie, quantity=1)


def _order_line(model, stock, group="GROUP00001", username="alice", quantity=1, **extra):
    return model.objects.create(
        username=username,
        product_id=stock.product_id,
        product_name=stock.product_name,
        unit_price=stock.shop_price,
        quantity=quantity,
        order_group_id=group,
        payment_method="COD",
        placed_at=timezone.now(),
        **extra,
    )


@pytest.fixture()
def make_placed():
    def factory(stock, **kwargs):
        return _order_line(PlacedLine, stock, **kwargs)

    return factory


@pytest.fixture()
def make_to_receive():
    def factory(stock, **kwargs):
        return _order_line(ToReceiveLine, stock, **kwargs)

    return factory


@pytest.fixture()
def make_received():
    def factory(stock, **kwargs):
        kwargs.setdefault("received_at", timezone.localdate())
        return _order_line(ReceivedLine, stock, **kwargs)

    return factory
