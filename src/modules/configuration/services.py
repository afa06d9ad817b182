"""VAT configuration service.

One store-wide VAT rate, created once by an admin and then updated.
Both changes are audited with the Admin role.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Optional

import structlog
from django.db import transaction

from modules.accounts.models import AccountRole
from modules.configuration.exceptions import (
    InvalidVatValue,
    VatAlreadyExists,
    VatNotFound,
)

if TYPE_CHECKING:
    from modules.audit.services import AuditLog
    from modules.configuration.models import VatSetting
    from modules.configuration.repositories.interfaces import IVatRepository

logger = structlog.get_logger(__name__)


def coerce_vat_value(value: Any) -> Decimal:
    """JSON numbers only; strings and booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise InvalidVatValue()
    amount = Decimal(str(value))
    if not amount.is_finite() or amount < 0:
        raise InvalidVatValue("VAT value must be a non-negative number.")
    return amount


class VatService:
    def __init__(self, repository: IVatRepository, audit_log: Optional[AuditLog] = None) -> None:
        self._repo = repository
        self._audit = audit_log

    def get_vat(self) -> Optional[VatSetting]:
        return self._repo.get_current()

    @transaction.atomic
    def create_vat(self, value: Any, admin_username: str = "") -> VatSetting:
        """Raises ``InvalidVatValue`` or ``VatAlreadyExists``."""
        amount = coerce_vat_value(value)
        if self._repo.get_current() is not None:
            raise VatAlreadyExists()
        vat = self._repo.create(amount, updated_by=admin_username)
        self._record(admin_username, "Admin Added VAT", vat)
        logger.info("vat.created", value=str(amount), admin=admin_username)
        return vat

    @transaction.atomic
    def update_vat(self, value: Any, admin_username: str = "") -> VatSetting:
        """Raises ``InvalidVatValue`` or ``VatNotFound``."""
        amount = coerce_vat_value(value)
        vat = self._repo.update(amount, updated_by=admin_username)
        if vat is None:
            raise VatNotFound()
        self._record(admin_username, "Admin Updated VAT", vat)
        logger.info("vat.updated", value=str(amount), admin=admin_username)
        return vat

    def _record(self, admin_username: str, action: str, vat: VatSetting) -> None:
        if self._audit is not None:
            self._audit.append(
                actor_username=admin_username,
                actor_role=AccountRole.ADMIN,
                action=action,
                affected_id=str(vat.id),
            )
