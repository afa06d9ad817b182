"""Unit tests for the order DTOs."""

from __future__ import annotations

from uuid import uuid4

import pytest
from pydantic import ValidationError

from modules.accounts.models import AccountRole
from modules.orders.dtos import (
    CancelOrderDTO,
    MarkReceivedDTO,
    PlaceOrderDTO,
    SelectedLineDTO,
)

pytestmark = pytest.mark.unit


class TestSelectedLineDTO:
    def test_quantity_is_optional(self):
        assert SelectedLineDTO(line_id=uuid4()).quantity is None

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_quantity_below_one_raises(self, quantity):
        with pytest.raises(ValidationError, match="Quantity must be at least 1"):
            SelectedLineDTO(line_id=uuid4(), quantity=quantity)


class TestPlaceOrderDTO:
    def test_text_is_stripped(self):
        dto = PlaceOrderDTO(
            username="  alice ",
            selected_lines=[SelectedLineDTO(line_id=uuid4())],
            payment_method=" GCash ",
        )

        assert dto.username == "alice"
        assert dto.payment_method == "GCash"
        assert dto.shipping_options == {}
        assert dto.total_price is None

    def test_frozen(self):
        dto = PlaceOrderDTO(username="alice", selected_lines=[], payment_method="COD")

        with pytest.raises(ValidationError):
            dto.username = "bob"


class TestCancelOrderDTO:
    def test_customer_by_default(self):
        dto = CancelOrderDTO(line_id=uuid4(), reason=" changed mind ")

        assert dto.by_customer
        assert dto.reason == "changed mind"

    @pytest.mark.parametrize("role", [AccountRole.STAFF, AccountRole.ADMIN])
    def test_staff_and_admin(self, role):
        assert not CancelOrderDTO(line_id=uuid4(), reason="x", actor_role=role).by_customer


def test_mark_received_strips_staff_username():
    dto = MarkReceivedDTO(line_id=uuid4(), staff_username="  sam ")

    assert dto.staff_username == "sam"
    assert dto.received_date is None
