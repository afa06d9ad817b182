"""Wiring of the order services with their Django collaborators."""

from __future__ import annotations

from modules.accounts.repositories.django_repository import AccountDjangoDirectory
from modules.audit.factories import build_audit_log
from modules.inventory.repositories.django_repository import (
    StockDjangoCatalog,
    StockDjangoRepository,
)
from modules.inventory.services import InventoryLedger
from modules.notifications.senders import EmailNotificationSender
from modules.orders.repositories.django_repository import OrderLineDjangoStore
from modules.orders.services import CartService, OrderLifecycleService


def build_order_service() -> OrderLifecycleService:
    audit_log = build_audit_log()
    return OrderLifecycleService(
        line_store=OrderLineDjangoStore(),
        ledger=InventoryLedger(StockDjangoRepository(), audit_log=audit_log),
        audit_log=audit_log,
        account_directory=AccountDjangoDirectory(),
        catalog=StockDjangoCatalog(),
        notifier=EmailNotificationSender(),
    )


def build_cart_service() -> CartService:
    audit_log = build_audit_log()
    return CartService(
        line_store=OrderLineDjangoStore(),
        ledger=InventoryLedger(StockDjangoRepository(), audit_log=audit_log),
        catalog=StockDjangoCatalog(),
        audit_log=audit_log,
    )
