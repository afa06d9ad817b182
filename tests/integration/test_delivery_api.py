"""Integration tests for supplier delivery intake and receipt."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.audit.models import AuditEntry
from modules.inventory.models import Delivery, StockRecord

pytestmark = pytest.mark.integration

URL = "/api/v1/deliveries/"


def _payload(**overrides):
    payload = {
        "product_name": "Dad Cap",
        "color": "Red",
        "size": "OS",
        "supplier_name": "Headwear Co.",
        "supplier_price": "150.00",
        "shop_price": "349.00",
        "quantity": 6,
        "staff_username": "sam",
    }
    payload.update(overrides)
    return payload


class TestAddDelivery:
    def test_created_as_pending(self, auth_client):
        response = auth_client.post(URL, _payload(), format="json")

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Delivery added successfully."
        assert body["delivery"]["delivered_at"] is None
        assert body["delivery"]["total_cost"] == "900.00"
        assert AuditEntry.objects.get().action == "Staff Added New Delivery Products"

    def test_missing_supplier_is_400(self, auth_client):
        response = auth_client.post(URL, _payload(supplier_name=""), format="json")

        assert response.status_code == 400
        assert not Delivery.objects.exists()

    def test_pending_listing(self, auth_client):
        auth_client.post(URL, _payload(), format="json")

        response = auth_client.get(URL)

        assert response.status_code == 200
        assert [row["product_name"] for row in response.json()] == ["Dad Cap"]

    def test_requires_authentication(self, api_client):
        response = api_client.post(URL, _payload(), format="json")

        assert response.status_code == 401


class TestDeliver:
    def test_existing_product_restocked(self, auth_client, tee):
        created = auth_client.post(
            URL, _payload(product_id=tee.product_id), format="json"
        ).json()["delivery"]

        response = auth_client.post(
            f"{URL}{created['id']}/deliver/", {"staff_username": "sam"}, format="json"
        )

        assert response.status_code == 200
        tee.refresh_from_db()
        assert tee.quantity == 16
        assert tee.shop_price == Decimal("349.00")
        history = auth_client.get(f"{URL}history/").json()
        assert [row["id"] for row in history] == [created["id"]]
        assert auth_client.get(URL).json() == []

    def test_new_product_stocked(self, auth_client):
        created = auth_client.post(URL, _payload(), format="json").json()["delivery"]

        auth_client.post(
            f"{URL}{created['id']}/deliver/", {"staff_username": "sam"}, format="json"
        )

        assert StockRecord.objects.get(product_id=created["product_id"]).quantity == 6

    def test_staff_username_required(self, auth_client):
        created = auth_client.post(URL, _payload(), format="json").json()["delivery"]

        response = auth_client.post(f"{URL}{created['id']}/deliver/", {}, format="json")

        assert response.status_code == 400
        assert response.json()["message"] == "Staff username is required."

    def test_unknown_delivery_is_404(self, auth_client):
        response = auth_client.post(
            f"{URL}not-a-delivery/deliver/", {"staff_username": "sam"}, format="json"
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Delivery not found."

    def test_deliver_all(self, auth_client, tee):
        auth_client.post(URL, _payload(product_id=tee.product_id, quantity=2), format="json")
        auth_client.post(URL, _payload(product_id=tee.product_id, quantity=3), format="json")

        response = auth_client.post(
            f"{URL}deliver-all/", {"staff_username": "sam", "role": "Admin"}, format="json"
        )

        assert response.status_code == 200
        assert response.json()["count"] == 2
        tee.refresh_from_db()
        assert tee.quantity == 15
        assert AuditEntry.objects.get(
            action="Admin Set All Deliveries as Delivered"
        ).actor_role == "Admin"
