"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.  They derive
from the core taxonomy, so the API exception handler maps them to HTTP
statuses without per-view translation.
"""

from __future__ import annotations

from modules.core.exceptions import InvalidRequest, NotFound


class InvalidOrderRequest(InvalidRequest):
    """Missing or malformed order input (no lines, no reason, no staff)."""

    default_message = "Invalid order request."


class OrderLineNotFound(NotFound):
    """The line is not in the partition the transition starts from."""

    default_message = "Order not found."


class CartLineNotFound(NotFound):
    """The cart line does not exist or belongs to another customer."""

    default_message = "Product not found in cart."


class ProductNotFound(NotFound):
    """The catalog has no product with the given id."""

    default_message = "Product not found."
