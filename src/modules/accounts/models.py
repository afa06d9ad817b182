"""Account directory model.

Holds the profile data other contexts snapshot into audit entries and use
to address notifications.  Account management itself (sign-up, password
changes, profile editing) lives outside this service; rows are written by
the account platform and only read here.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class AccountRole(models.TextChoices):
    CUSTOMER = "Customer", "Customer"
    STAFF = "Staff", "Staff"
    ADMIN = "Admin", "Admin"


class AccountInfo(BaseModel):
    """Profile of a customer, staff member or administrator."""

    username = models.CharField(max_length=150, unique=True)
    role = models.CharField(
        max_length=20,
        choices=AccountRole.choices,
        default=AccountRole.CUSTOMER,
    )
    email = models.EmailField(blank=True, default="")
    recipient_name = models.CharField(max_length=255, blank=True, default="")
    house_street = models.CharField(max_length=255, blank=True, default="")
    region = models.CharField(max_length=255, blank=True, default="")
    phone = models.CharField(max_length=32, blank=True, default="")

    class Meta:
        db_table = "account_info"
        ordering = ["username"]

    @property
    def shipping_address(self) -> str:
        return ", ".join(part for part in (self.house_street, self.region) if part)

    def as_snapshot(self) -> dict:
        """Denormalised copy stored alongside audit entries."""
        return {
            "username": self.username,
            "role": self.role,
            "email": self.email,
            "recipient_name": self.recipient_name,
            "house_street": self.house_street,
            "region": self.region,
            "phone": self.phone,
        }

    def __str__(self) -> str:
        return f"{self.username} ({self.role})"
