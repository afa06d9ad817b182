"""Audit trail model.

``AuditEntry`` is append-only: every mutating action across the platform
writes one row, capturing who acted, in which role, on what, and a
denormalised copy of the actor's account at that moment.  Rows are never
edited or deleted; ``save`` on an existing row and ``delete`` both raise.
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone

from modules.accounts.models import AccountRole
from modules.core.models import BaseModel


class AppendOnlyError(Exception):
    """An attempt was made to modify or remove an audit entry."""


class AuditEntry(BaseModel):
    actor_username = models.CharField(max_length=150, blank=True, default="")
    actor_role = models.CharField(max_length=20, choices=AccountRole.choices)
    action = models.CharField(max_length=255)
    affected_id = models.CharField(max_length=64, null=True, blank=True)  # noqa: DJ01
    actor_snapshot = models.JSONField(default=dict, blank=True)
    timestamp = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = "audit_trail_logs"
        ordering = ["-timestamp", "-id"]
        indexes = [
            models.Index(
                fields=["actor_role", "-timestamp"],
                name="audit_role_ts_idx",
            ),
        ]

    def save(self, *args, **kwargs) -> None:
        if not self._state.adding:
            raise AppendOnlyError("Audit entries cannot be modified.")
        super().save(*args, **kwargs)

    def delete(self, using=None, keep_parents=False):
        raise AppendOnlyError("Audit entries cannot be deleted.")

    def __str__(self) -> str:
        return f"[{self.actor_role}] {self.actor_username}: {self.action}"
