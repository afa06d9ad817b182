"""Audit repository interface.

Extends ``IReadRepository[AuditEntry]`` with a single write operation:
``append``.  There is deliberately no ``save``/``delete`` in the contract.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from modules.core.repositories.interfaces import IReadRepository

if TYPE_CHECKING:
    from modules.audit.models import AuditEntry


class IAuditRepository(IReadRepository["AuditEntry"]):
    @abstractmethod
    def append(self, data: Dict[str, Any]) -> AuditEntry:
        """Insert one entry.

        ``data`` keys: ``actor_username``, ``actor_role``, ``action``,
        ``affected_id`` and ``actor_snapshot``.
        """

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[AuditEntry]:
        """Entries newest first, optionally filtered."""

    @abstractmethod
    def count(self) -> int:
        """Total number of entries."""
