"""Review domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import Conflict, InvalidRequest, NotFound


class InvalidReviewRequest(InvalidRequest):
    default_message = "Missing fields."


class ReceivedLineNotFound(NotFound):
    """Reviews are only accepted on the customer's own received lines."""

    default_message = "Received order not found."


class ReviewAlreadyExists(Conflict):
    default_message = "This order has already been reviewed."


class ReviewNotFound(NotFound):
    default_message = "Review not found."
