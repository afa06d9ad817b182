"""Unit tests for the order line partition models."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest
from django.utils import timezone

from modules.orders.constants import ORDER_GROUP_ID_ALPHABET, VALID_TRANSITIONS, LineState
from modules.orders.models import (
    PARTITION_MODELS,
    CanceledLine,
    CartLine,
    OrderLine,
    PlacedLine,
)

pytestmark = pytest.mark.unit


class TestOrderGroupId:
    def test_length_and_alphabet(self):
        group_id = OrderLine.generate_order_group_id()

        assert len(group_id) == 10
        assert set(group_id) <= set(ORDER_GROUP_ID_ALPHABET)

    def test_length_follows_setting(self, settings):
        settings.ORDER_GROUP_ID_LENGTH = 16

        assert len(OrderLine.generate_order_group_id()) == 16

    def test_ids_differ(self):
        ids = {OrderLine.generate_order_group_id() for _ in range(50)}
        assert len(ids) == 50


class TestPartitions:
    def test_every_state_has_a_table(self):
        assert set(PARTITION_MODELS) == set(LineState.values)
        tables = {model._meta.db_table for model in PARTITION_MODELS.values()}
        assert len(tables) == 5

    def test_state_reflects_partition(self):
        assert CartLine().state == LineState.CART
        assert PlacedLine().state == LineState.PLACED
        assert CanceledLine().state == LineState.CANCELED

    def test_terminal_states_have_no_exits(self):
        assert VALID_TRANSITIONS[LineState.RECEIVED] == set()
        assert VALID_TRANSITIONS[LineState.CANCELED] == set()

    def test_placed_line_defaults(self):
        line = PlacedLine.objects.create(
            order_group_id="ABCDEFGHIJ",
            username="alice",
            product_id="P1",
            product_name="Basic Tee",
            unit_price=Decimal("299.00"),
            quantity=2,
            payment_method="COD",
            placed_at=timezone.make_aware(datetime(2024, 6, 1, 10, 0)),
        )

        assert line.shipping_option == "Standard"
        assert line.shipping_price is None
        assert line.canceled_reason == ""
        assert line.subtotal == Decimal("598.00")
