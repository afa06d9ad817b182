"""Configuration domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import Conflict, InvalidRequest, NotFound


class InvalidVatValue(InvalidRequest):
    default_message = "VAT value must be a number."


class VatAlreadyExists(Conflict):
    default_message = "VAT already exists. Use update instead."


class VatNotFound(NotFound):
    default_message = "VAT not found. Please create it first."
