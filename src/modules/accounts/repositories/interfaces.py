"""Account directory interface.

Read-only look-up used to snapshot actor info into audit entries and to
resolve the shipping address and e-mail for notifications.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class IAccountDirectory(ABC):
    """Directory of customer, staff and admin accounts."""

    @abstractmethod
    def find_account_info(self, username: str) -> Optional[Dict[str, Any]]:
        """Return the account snapshot for ``username`` or ``None``."""
