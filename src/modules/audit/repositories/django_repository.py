"""Django ORM implementation of the audit repository.

``append`` runs inside its own savepoint: when it is called from a larger
transaction (an order transition) a failed insert rolls back only the
savepoint, leaving the surrounding transaction usable.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from django.core.exceptions import ValidationError
from django.db import transaction

from modules.audit.models import AuditEntry
from modules.audit.repositories.interfaces import IAuditRepository


class AuditDjangoRepository(IAuditRepository):
    def get_by_id(self, id: str) -> Optional[AuditEntry]:
        try:
            return AuditEntry.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[AuditEntry]:
        return list(self.queryset(filters))

    def queryset(self, filters: Optional[Dict[str, Any]] = None):
        queryset = AuditEntry.objects.all().order_by("-timestamp", "-id")
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    def append(self, data: Dict[str, Any]) -> AuditEntry:
        with transaction.atomic():
            return AuditEntry.objects.create(
                actor_username=data.get("actor_username") or "",
                actor_role=data["actor_role"],
                action=data["action"],
                affected_id=data.get("affected_id"),
                actor_snapshot=data.get("actor_snapshot") or {},
            )

    def count(self) -> int:
        return AuditEntry.objects.count()
