"""Integration test for the ``seed_data`` management command."""

from io import StringIO

import pytest
from django.contrib.auth import get_user_model
from django.core.management import call_command

from modules.accounts.models import AccountInfo
from modules.inventory.models import StockRecord
from modules.orders.models import CartLine

pytestmark = pytest.mark.integration


def test_seed_creates_accounts_stock_and_carts():
    out = StringIO()

    call_command("seed_data", stdout=out)

    assert get_user_model().objects.filter(username__in=["admin", "staff", "alice"]).count() == 3
    assert AccountInfo.objects.count() == 5
    assert StockRecord.objects.count() == 10
    assert CartLine.objects.filter(username="alice").count() == 3
    assert "Seed completed" in out.getvalue()


def test_seed_is_rerunnable():
    call_command("seed_data", stdout=StringIO())
    call_command("seed_data", stdout=StringIO())

    assert StockRecord.objects.count() == 10
    assert CartLine.objects.filter(username="alice").count() == 3
