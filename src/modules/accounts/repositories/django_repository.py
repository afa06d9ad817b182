"""Django ORM implementation of the account directory."""

from __future__ import annotations

from typing import Any, Dict, Optional

from modules.accounts.models import AccountInfo
from modules.accounts.repositories.interfaces import IAccountDirectory


class AccountDjangoDirectory(IAccountDirectory):
    """Concrete account directory backed by the ``account_info`` table."""

    def find_account_info(self, username: str) -> Optional[Dict[str, Any]]:
        if not username:
            return None
        account = AccountInfo.objects.filter(username=username).first()
        if account is None:
            return None
        return account.as_snapshot()
