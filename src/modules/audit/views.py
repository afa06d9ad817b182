"""Audit trail API views.

Read-only: entries are written exclusively through ``AuditLog.append``
by the services of the other modules.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework.mixins import ListModelMixin
from rest_framework.viewsets import GenericViewSet

from modules.audit.filters import AuditEntryFilter
from modules.audit.models import AuditEntry
from modules.audit.repositories.django_repository import AuditDjangoRepository
from modules.audit.serializers import AuditEntrySerializer
from modules.core.pagination import StandardResultsSetPagination


class AuditLogViewSet(ListModelMixin, GenericViewSet):
    """GET /api/v1/audit-logs/?role=Staff

    Always newest first; ``role``, ``actor``, ``affected_id`` and a
    ``start_date``/``end_date`` window are available as filters.
    """

    queryset = AuditEntry.objects.all()
    serializer_class = AuditEntrySerializer
    filterset_class = AuditEntryFilter
    filter_backends = [DjangoFilterBackend]
    pagination_class = StandardResultsSetPagination

    def get_queryset(self):
        return AuditDjangoRepository().queryset()
