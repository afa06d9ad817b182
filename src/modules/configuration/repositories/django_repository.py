"""Django ORM implementation of the VAT repository."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional

from django.core.exceptions import ValidationError

from modules.configuration.models import VatSetting
from modules.configuration.repositories.interfaces import IVatRepository


class VatDjangoRepository(IVatRepository):
    def get_by_id(self, id: str) -> Optional[VatSetting]:
        try:
            return VatSetting.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[VatSetting]:
        queryset = VatSetting.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def get_current(self) -> Optional[VatSetting]:
        return VatSetting.objects.first()

    def create(self, value: Decimal, updated_by: str = "") -> VatSetting:
        return VatSetting.objects.create(value=value, updated_by=updated_by)

    def update(self, value: Decimal, updated_by: str = "") -> Optional[VatSetting]:
        vat = VatSetting.objects.select_for_update().first()
        if vat is None:
            return None
        vat.value = value
        vat.updated_by = updated_by
        vat.save(update_fields=["value", "updated_by"])
        return vat
