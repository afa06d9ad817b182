from __future__ import annotations

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class VatSetting(BaseModel):
    """Store-wide VAT rate (percent).  At most one row exists."""

    value = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        validators=[MinValueValidator(0)],
    )
    updated_by = models.CharField(max_length=150, blank=True, default="")

    class Meta:
        db_table = "vat_settings"
        ordering = ["created_at"]

    def __str__(self) -> str:
        return f"VAT {self.value}%"
