"""VAT repository interface."""

from __future__ import annotations

from abc import abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IReadRepository

if TYPE_CHECKING:
    from modules.configuration.models import VatSetting


class IVatRepository(IReadRepository["VatSetting"]):
    @abstractmethod
    def get_current(self) -> Optional[VatSetting]:
        """The VAT row, or ``None`` when it was never created."""

    @abstractmethod
    def create(self, value: Decimal, updated_by: str = "") -> VatSetting:
        """Insert the VAT row."""

    @abstractmethod
    def update(self, value: Decimal, updated_by: str = "") -> Optional[VatSetting]:
        """Change the VAT value; ``None`` when no row exists."""
