"""Plain-text bodies for customer e-mails."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Mapping


def render_receipt(
    recipient_name: str,
    items: Iterable[Mapping],
    total: Decimal | str,
    address: str,
) -> str:
    lines = [
        f"Hello {recipient_name},",
        "",
        "Thank you for shopping with us! Your order has been placed successfully.",
        "",
        "RECEIPT:",
        "",
    ]
    for index, item in enumerate(items, start=1):
        lines.extend(
            [
                f"Item {index}:",
                f"  - Product: {item['product_name']}",
                f"  - Price: {item['price']}",
                f"  - Quantity: {item['quantity']}",
                f"  - Payment Method: {item['payment_method']}",
                f"  - Shipping Date: {item['shipping_date']}",
                "",
            ]
        )
    lines.extend(
        [
            f"Total Price: {total}",
            "",
            "Shipping Address:",
            address or "-",
            "",
            "If you have any questions regarding your order, "
            "feel free to contact our support team.",
        ]
    )
    return "\n".join(lines)


def render_cancellation(recipient_name: str, line_id: str, reason: str) -> str:
    return (
        f"Dear {recipient_name},\n\n"
        f"Your order (ID: {line_id}) has been successfully canceled.\n\n"
        f"Reason: {reason}\n"
    )
