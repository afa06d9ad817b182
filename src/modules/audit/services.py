"""Audit log service.

Every state-changing use-case in the platform reports through
``AuditLog.append``.  Appending is best-effort: a failure is logged and
swallowed so it can never revert the transition that triggered it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog

if TYPE_CHECKING:
    from modules.accounts.repositories.interfaces import IAccountDirectory
    from modules.audit.models import AuditEntry
    from modules.audit.repositories.interfaces import IAuditRepository

logger = structlog.get_logger(__name__)


class AuditLog:
    """Append-only audit trail.

    Receives the repository and the account directory via constructor
    injection; the directory supplies the actor snapshot when the caller
    does not pass one.
    """

    def __init__(
        self,
        repository: IAuditRepository,
        account_directory: IAccountDirectory,
    ) -> None:
        self._repo = repository
        self._directory = account_directory

    def append(
        self,
        actor_username: str,
        actor_role: str,
        action: str,
        affected_id: Optional[str] = None,
        actor_snapshot: Optional[Dict[str, Any]] = None,
    ) -> Optional[AuditEntry]:
        """Record one action.  Returns ``None`` when the insert failed."""
        log = logger.bind(
            actor=actor_username,
            role=actor_role,
            action=action,
            affected_id=affected_id,
        )
        try:
            if actor_snapshot is None:
                actor_snapshot = self.snapshot_for(actor_username)
            entry = self._repo.append(
                {
                    "actor_username": actor_username,
                    "actor_role": actor_role,
                    "action": action,
                    "affected_id": affected_id,
                    "actor_snapshot": actor_snapshot,
                }
            )
        except Exception:
            log.exception("audit.append_failed")
            return None

        log.info("audit.appended")
        return entry

    def snapshot_for(self, username: str) -> Dict[str, Any]:
        """Account snapshot for ``username``; ``{}`` when unknown."""
        if not username:
            return {}
        return self._directory.find_account_info(username) or {}

    def list_entries(self, role: Optional[str] = None) -> List[AuditEntry]:
        """Entries newest first, optionally restricted to one role."""
        filters = {"actor_role": role} if role else None
        return self._repo.list(filters)
