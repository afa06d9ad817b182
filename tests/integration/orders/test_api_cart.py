"""Integration tests for the cart endpoints."""

from __future__ import annotations

from uuid import uuid4

import pytest

from modules.audit.models import AuditEntry
from modules.orders.models import CartLine

pytestmark = pytest.mark.integration


class TestAddToCart:
    def test_adds_product_with_catalog_snapshot(self, auth_client, tee):
        response = auth_client.post(
            "/api/v1/cart/", {"username": "alice", "product_id": tee.product_id}, format="json"
        )

        assert response.status_code == 201
        line = response.json()["line"]
        assert line["product_name"] == "Basic Tee"
        assert line["unit_price"] == "299.00"
        assert line["quantity"] == 1
        assert line["state"] == "Cart"
        assert AuditEntry.objects.get().action == "Add to Cart"

    def test_same_product_twice_increments(self, auth_client, tee):
        payload = {"username": "alice", "product_id": tee.product_id}
        auth_client.post("/api/v1/cart/", payload, format="json")

        response = auth_client.post("/api/v1/cart/", payload, format="json")

        assert response.json()["line"]["quantity"] == 2
        assert CartLine.objects.count() == 1

    def test_unknown_product(self, auth_client):
        response = auth_client.post(
            "/api/v1/cart/", {"username": "alice", "product_id": "NOPE"}, format="json"
        )

        assert response.status_code == 404


class TestViewCart:
    def test_lists_lines_with_available_quantity(self, auth_client, tee_in_cart):
        response = auth_client.get("/api/v1/cart/alice/")

        assert response.status_code == 200
        lines = response.json()
        assert len(lines) == 1
        assert lines[0]["line_id"] == str(tee_in_cart.id)
        assert lines[0]["available_quantity"] == 10

    def test_empty_cart(self, auth_client):
        assert auth_client.get("/api/v1/cart/nobody/").json() == []


class TestUpdateAndRemove:
    def test_update_quantity(self, auth_client, tee_in_cart):
        response = auth_client.put(
            f"/api/v1/cart/items/{tee_in_cart.id}/",
            {"username": "alice", "quantity": 4},
            format="json",
        )

        assert response.status_code == 200
        tee_in_cart.refresh_from_db()
        assert tee_in_cart.quantity == 4

    def test_quantity_below_one(self, auth_client, tee_in_cart):
        response = auth_client.put(
            f"/api/v1/cart/items/{tee_in_cart.id}/",
            {"username": "alice", "quantity": 0},
            format="json",
        )

        assert response.status_code == 400

    def test_remove(self, auth_client, tee_in_cart):
        response = auth_client.delete(
            f"/api/v1/cart/items/{tee_in_cart.id}/?username=alice"
        )

        assert response.status_code == 200
        assert not CartLine.objects.exists()
        assert AuditEntry.objects.get().action == "Delete Cart Product"

    def test_remove_missing_line(self, auth_client, alice):
        response = auth_client.delete(f"/api/v1/cart/items/{uuid4()}/?username=alice")

        assert response.status_code == 404
