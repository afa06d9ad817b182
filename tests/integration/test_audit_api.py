"""Integration tests for GET /api/v1/audit-logs/."""

from __future__ import annotations

import pytest

from modules.accounts.models import AccountRole
from modules.audit.factories import build_audit_log

pytestmark = pytest.mark.integration

URL = "/api/v1/audit-logs/"


@pytest.fixture()
def entries():
    log = build_audit_log()
    log.append("alice", AccountRole.CUSTOMER, "Add to Cart", "TEE-BLK-M")
    log.append("sam", AccountRole.STAFF, "Staff Restock a Product", "TEE-BLK-M")
    log.append("alice", AccountRole.CUSTOMER, "Place an Order", "TEE-BLK-M")
    log.append("root", AccountRole.ADMIN, "Admin Added VAT")


class TestAuditLogApi:
    def test_newest_first(self, auth_client, entries):
        response = auth_client.get(URL)

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 4
        assert body["results"][0]["action"] == "Admin Added VAT"
        assert body["results"][-1]["action"] == "Add to Cart"

    def test_filter_by_role(self, auth_client, entries):
        response = auth_client.get(URL, {"role": "Customer"})

        actions = [entry["action"] for entry in response.json()["results"]]
        assert actions == ["Place an Order", "Add to Cart"]

    def test_filter_by_actor(self, auth_client, entries):
        response = auth_client.get(URL, {"actor": "sam"})

        assert response.json()["count"] == 1

    def test_pagination(self, auth_client, entries):
        response = auth_client.get(URL, {"page_size": 3})

        body = response.json()
        assert len(body["results"]) == 3
        assert body["next"] is not None

    def test_read_only(self, auth_client, entries):
        response = auth_client.post(URL, {"action": "forged"}, format="json")

        assert response.status_code == 405
