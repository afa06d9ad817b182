"""Inventory domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import Conflict, InvalidRequest, NotFound


class StockNotFound(NotFound):
    """No ledger row exists for the product."""

    default_message = "Product not found."


class InsufficientStock(Conflict):
    """A decrement would take stock below zero while negative stock is disabled."""

    default_message = "Insufficient stock."


class InvalidStockRequest(InvalidRequest):
    """Malformed quantity or missing staff username."""


class DeliveryNotFound(NotFound):
    """No pending delivery has the given id."""

    default_message = "Delivery not found."
