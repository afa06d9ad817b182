"""Order domain constants.

An order line's state is the partition (table) it lives in.  The transition
table below is the order lifecycle:

    Cart -> Placed -> ToReceive -> Received
              |           |
              +-----------+-> Canceled
"""

from django.db import models


class LineState(models.TextChoices):
    CART = "Cart", "Cart"
    PLACED = "Placed", "Placed"
    TO_RECEIVE = "ToReceive", "To receive"
    RECEIVED = "Received", "Received"
    CANCELED = "Canceled", "Canceled"


VALID_TRANSITIONS: dict[str, set[str]] = {
    LineState.CART: {LineState.PLACED},
    LineState.PLACED: {LineState.TO_RECEIVE, LineState.CANCELED},
    LineState.TO_RECEIVE: {LineState.RECEIVED, LineState.CANCELED},
    LineState.RECEIVED: set(),
    LineState.CANCELED: set(),
}

TERMINAL_STATES: set[str] = {LineState.RECEIVED, LineState.CANCELED}

# URL slug -> partition, used by the read endpoints.
PARTITION_SLUGS: dict[str, str] = {
    "placed": LineState.PLACED,
    "to-receive": LineState.TO_RECEIVE,
    "received": LineState.RECEIVED,
    "canceled": LineState.CANCELED,
}

ORDER_GROUP_ID_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
)
ORDER_GROUP_ID_LENGTH = 10

DEFAULT_SHIPPING_OPTION = "Standard"
