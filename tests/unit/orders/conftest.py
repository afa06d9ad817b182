from __future__ import annotations

from decimal import Decimal

import pytest

from modules.audit.services import AuditLog
from modules.inventory.dtos import ProductSnapshot
from modules.inventory.services import InventoryLedger
from modules.orders.services import CartService, OrderLifecycleService
from tests.unit.orders.fakes import (
    FakeAccountDirectory,
    FakeAuditRepository,
    FakeCatalog,
    FakeOrderLineStore,
    FakeStockRepository,
    RecordingNotifier,
)

ALICE = {
    "username": "alice",
    "role": "Customer",
    "email": "alice@example.com",
    "recipient_name": "Alice Reyes",
    "house_street": "12 Mango St.",
    "region": "Metro Manila",
    "phone": "",
}


@pytest.fixture()
def store():
    return FakeOrderLineStore()


@pytest.fixture()
def stock_repo():
    return FakeStockRepository({"P1": 10, "P2": 5})


@pytest.fixture()
def audit_repo():
    return FakeAuditRepository()


@pytest.fixture()
def directory():
    return FakeAccountDirectory({"alice": ALICE, "sam": {"username": "sam", "role": "Staff"}})


@pytest.fixture()
def catalog():
    return FakeCatalog(
        [
            ProductSnapshot(
                product_id="P1",
                product_name="Basic Tee",
                color="Black",
                size="M",
                price=Decimal("299.00"),
            ),
            ProductSnapshot(
                product_id="P2",
                product_name="Zip Hoodie",
                color="Grey",
                size="L",
                price=Decimal("899.00"),
            ),
        ]
    )


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def audit_log(audit_repo, directory):
    return AuditLog(repository=audit_repo, account_directory=directory)


@pytest.fixture()
def ledger(stock_repo, audit_log):
    return InventoryLedger(stock_repo, audit_log=audit_log, allow_negative_stock=True)


@pytest.fixture()
def service(store, ledger, audit_log, directory, catalog, notifier):
    return OrderLifecycleService(
        line_store=store,
        ledger=ledger,
        audit_log=audit_log,
        account_directory=directory,
        catalog=catalog,
        notifier=notifier,
    )


@pytest.fixture()
def cart_service(store, ledger, catalog, audit_log):
    return CartService(line_store=store, ledger=ledger, catalog=catalog, audit_log=audit_log)


@pytest.fixture()
def cart_line(store):
    return store.add(
        "Cart",
        username="alice",
        product_id="P1",
        product_name="Basic Tee",
        unit_price=Decimal("299.00"),
        quantity=2,
    )
