"""Audit trail read serializer."""

from __future__ import annotations

from rest_framework import serializers

from modules.audit.models import AuditEntry


class AuditEntrySerializer(serializers.ModelSerializer):
    class Meta:
        model = AuditEntry
        fields = [
            "id",
            "actor_username",
            "actor_role",
            "action",
            "affected_id",
            "actor_snapshot",
            "timestamp",
        ]
        read_only_fields = fields
