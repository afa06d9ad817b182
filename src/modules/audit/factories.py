"""Wiring of the audit log with its Django collaborators."""

from __future__ import annotations

from modules.accounts.repositories.django_repository import AccountDjangoDirectory
from modules.audit.repositories.django_repository import AuditDjangoRepository
from modules.audit.services import AuditLog


def build_audit_log() -> AuditLog:
    return AuditLog(
        repository=AuditDjangoRepository(),
        account_directory=AccountDjangoDirectory(),
    )
