"""Unit tests for the append-only audit log."""

from __future__ import annotations

import pytest

from modules.accounts.models import AccountInfo, AccountRole
from modules.audit.factories import build_audit_log
from modules.audit.models import AppendOnlyError, AuditEntry
from modules.audit.services import AuditLog
from tests.unit.orders.fakes import FakeAccountDirectory, FakeAuditRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def audit_log():
    return build_audit_log()


class TestAppend:
    def test_snapshots_actor_account(self, audit_log):
        AccountInfo.objects.create(
            username="alice",
            email="alice@example.com",
            recipient_name="Alice Reyes",
            region="Metro Manila",
        )

        entry = audit_log.append("alice", AccountRole.CUSTOMER, "Place an Order", "P1")

        assert entry.actor_snapshot["email"] == "alice@example.com"
        assert entry.actor_snapshot["region"] == "Metro Manila"
        assert entry.affected_id == "P1"

    def test_unknown_actor_gets_empty_snapshot(self, audit_log):
        entry = audit_log.append("ghost", AccountRole.STAFF, "Staff Restock a Product")

        assert entry.actor_snapshot == {}

    def test_explicit_snapshot_is_kept(self, audit_log):
        entry = audit_log.append(
            "alice",
            AccountRole.CUSTOMER,
            "Place an Order",
            actor_snapshot={"username": "alice", "region": "Cebu"},
        )

        assert entry.actor_snapshot == {"username": "alice", "region": "Cebu"}

    def test_failure_is_swallowed(self):
        log = AuditLog(FakeAuditRepository(fail=True), FakeAccountDirectory())

        assert log.append("alice", AccountRole.CUSTOMER, "Place an Order") is None


class TestAppendOnly:
    def test_entries_cannot_be_edited(self, audit_log):
        entry = audit_log.append("alice", AccountRole.CUSTOMER, "Add to Cart")
        entry.action = "Something else"

        with pytest.raises(AppendOnlyError):
            entry.save()

    def test_entries_cannot_be_deleted(self, audit_log):
        entry = audit_log.append("alice", AccountRole.CUSTOMER, "Add to Cart")

        with pytest.raises(AppendOnlyError):
            entry.delete()
        assert AuditEntry.objects.count() == 1


class TestListEntries:
    def test_newest_first_and_role_filter(self, audit_log):
        audit_log.append("alice", AccountRole.CUSTOMER, "Add to Cart")
        audit_log.append("sam", AccountRole.STAFF, "Staff Restock a Product")
        audit_log.append("alice", AccountRole.CUSTOMER, "Place an Order")

        everything = audit_log.list_entries()
        staff_only = audit_log.list_entries(role=AccountRole.STAFF)

        assert [e.action for e in everything][0] == "Place an Order"
        assert len(everything) == 3
        assert [e.actor_username for e in staff_only] == ["sam"]
