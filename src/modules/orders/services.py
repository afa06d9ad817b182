"""Order service layer (Use Cases).

Coordinates the order line partitions, the inventory ledger, the audit log
and customer notifications.  Every transition is atomic: the service
defines the unit-of-work boundary, so a failure part-way through leaves
every partition and stock level as it was.

Business rules enforced:
- Checkout moves selected cart lines to Placed under one order group and
  decrements stock by each line's quantity.
- A Placed line becomes ToReceive from the day before its shipping date;
  Standard shipping waits for an explicit staff move.
- Receipt is confirmed per order group.
- Cancellation restores stock; customers cancel from Placed, staff and
  admins from ToReceive.
- Audit appends never fail a transition.
- Notifications are sent after commit and never fail a transition.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union
from uuid import UUID

import structlog
from django.db import transaction
from django.utils import timezone

from modules.accounts.models import AccountRole
from modules.notifications.dtos import ReceiptItem, Recipient
from modules.orders.constants import (
    DEFAULT_SHIPPING_OPTION,
    VALID_TRANSITIONS,
    LineState,
)
from modules.orders.exceptions import (
    CartLineNotFound,
    InvalidOrderRequest,
    OrderLineNotFound,
    ProductNotFound,
)
from modules.orders.models import OrderLine
from modules.orders.shipping import (
    is_receivable,
    normalize_shipping_option,
    resolve_shipping_date,
    shipping_label,
)

if TYPE_CHECKING:
    from modules.accounts.repositories.interfaces import IAccountDirectory
    from modules.audit.services import AuditLog
    from modules.inventory.dtos import ProductSnapshot
    from modules.inventory.repositories.interfaces import IProductCatalog
    from modules.inventory.services import InventoryLedger
    from modules.notifications.interfaces import INotificationSender
    from modules.orders.dtos import (
        AddToCartDTO,
        CancelOrderDTO,
        MarkReceivedDTO,
        PlaceOrderDTO,
        UpdateCartLineDTO,
    )
    from modules.orders.models import CartLine
    from modules.orders.repositories.interfaces import IOrderLineStore

logger = structlog.get_logger(__name__)


def _shipping_address(account: Optional[Dict[str, Any]]) -> str:
    if not account:
        return ""
    parts = (account.get("house_street"), account.get("region"))
    return ", ".join(part for part in parts if part)


class OrderLifecycleService:
    """Application service for the order lifecycle.

    Receives its collaborators via constructor injection (DIP).
    """

    def __init__(
        self,
        line_store: IOrderLineStore,
        ledger: InventoryLedger,
        audit_log: AuditLog,
        account_directory: IAccountDirectory,
        catalog: IProductCatalog,
        notifier: Optional[INotificationSender] = None,
    ) -> None:
        self._store = line_store
        self._ledger = ledger
        self._audit = audit_log
        self._directory = account_directory
        self._catalog = catalog
        self._notifier = notifier

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def place_order(self, dto: PlaceOrderDTO) -> str:
        """Check out the selected cart lines as one order group.

        Steps:
        1. Validate the request and lock every selected cart line.
        2. Generate one order group id.
        3. Per line: write a Placed line (same id as the cart line),
           decrement stock, append a "Place an Order" audit entry.
        4. Remove the lines from the cart.
        5. After commit, e-mail the receipt.

        Raises:
            InvalidOrderRequest: no username, no lines, no payment method,
                or a line selected twice.
            CartLineNotFound: a selected line is not in the user's cart.
            ProductNotFound: a selected line's product is not in the catalog.
            InsufficientStock: negative stock is disabled and a product
                ran out.
        """
        self._validate_place_order(dto)
        log = logger.bind(username=dto.username, lines=len(dto.selected_lines))
        log.info("order.placement_started")

        selected = []
        for choice in dto.selected_lines:
            cart_line = self._store.get_for_update(LineState.CART, choice.line_id)
            if cart_line is None or cart_line.username != dto.username:
                raise CartLineNotFound(
                    f"Cart line {choice.line_id} not found for {dto.username}."
                )
            product = self._catalog.get_product(cart_line.product_id)
            if product is None:
                raise ProductNotFound(f"Product {cart_line.product_id} not found.")
            selected.append((cart_line, product, choice.quantity or cart_line.quantity))

        order_group_id = OrderLine.generate_order_group_id()
        account = self._directory.find_account_info(dto.username)
        actor_snapshot = account or {}
        placed_at = timezone.now()

        placed = []
        for cart_line, product, quantity in selected:
            option = normalize_shipping_option(
                dto.shipping_options.get(str(cart_line.id))
            )
            line = self._store.insert(
                LineState.PLACED,
                {
                    "id": cart_line.id,
                    "order_group_id": order_group_id,
                    "username": dto.username,
                    "staff_username": cart_line.staff_username,
                    **self._snapshot_fields(product),
                    "unit_price": cart_line.unit_price,
                    "quantity": quantity,
                    "payment_method": dto.payment_method,
                    "shipping_option": option,
                    "shipping_price": dto.shipping_price,
                    "placed_at": placed_at,
                },
            )
            self._ledger.decrement(line.product_id, quantity)
            self._audit.append(
                actor_username=dto.username,
                actor_role=AccountRole.CUSTOMER,
                action="Place an Order",
                affected_id=line.product_id,
                actor_snapshot=actor_snapshot,
            )
            placed.append(line)

        self._store.delete(LineState.CART, [cart_line.id for cart_line, _, _ in selected])

        total = dto.total_price
        if total is None:
            total = sum((line.subtotal for line in placed), Decimal("0"))
            total += dto.shipping_price or Decimal("0")
        self._schedule_order_confirmation(account, placed, total)

        log.info("order.placed", order_group_id=order_group_id)
        return order_group_id

    @transaction.atomic
    def advance_to_receivable(
        self,
        now: Optional[Union[date, datetime]] = None,
        username: Optional[str] = None,
    ) -> List[OrderLine]:
        """Move every due Placed line to ToReceive.

        A line is due once ``now`` reaches the day before its dated
        shipping option.  Standard lines and lines with an unparseable
        date are left alone.  Restricted to ``username`` when given.
        Idempotent: a second call at the same ``now`` moves nothing.
        """
        now = now or timezone.now()
        due = []
        for line in self._store.list(LineState.PLACED, username=username, for_update=True):
            if resolve_shipping_date(line.shipping_option) is None:
                if line.shipping_option == DEFAULT_SHIPPING_OPTION:
                    logger.debug(
                        "order.awaiting_staff_move",
                        line_id=str(line.id),
                        shipping_option=line.shipping_option,
                    )
                else:
                    logger.warning(
                        "order.invalid_shipping_date",
                        line_id=str(line.id),
                        shipping_option=line.shipping_option,
                    )
                continue
            if is_receivable(line.shipping_option, now):
                due.append(line)

        if not due:
            return []
        moved = self._store.move(due, LineState.TO_RECEIVE)
        logger.info("order.advanced_to_receive", username=username, count=len(moved))
        return moved

    @transaction.atomic
    def move_to_receive(self, line_id: UUID) -> OrderLine:
        """Staff move of a single Placed line to ToReceive.

        Raises:
            OrderLineNotFound: the line is not in Placed.
        """
        line = self._store.get_for_update(LineState.PLACED, line_id)
        if line is None:
            raise OrderLineNotFound(f"Order {line_id} not found in Placed.")
        self._check_transition(line.state, LineState.TO_RECEIVE)
        moved = self._store.move([line], LineState.TO_RECEIVE)[0]
        logger.info("order.moved_to_receive", line_id=str(line_id))
        return moved

    @transaction.atomic
    def mark_received(self, dto: MarkReceivedDTO) -> List[OrderLine]:
        """Move every ToReceive line of ``dto.line_id``'s group to Received.

        Raises:
            InvalidOrderRequest: no staff username.
            OrderLineNotFound: the line is not in ToReceive.
        """
        if not dto.staff_username:
            raise InvalidOrderRequest("Staff username is required.")

        line = self._store.get_for_update(LineState.TO_RECEIVE, dto.line_id)
        if line is None:
            raise OrderLineNotFound(f"Order {dto.line_id} not found in To Receive.")
        self._check_transition(line.state, LineState.RECEIVED)

        group_id = line.order_group_id
        group = (
            self._store.list_group(LineState.TO_RECEIVE, group_id, for_update=True)
            if group_id
            else [line]
        )
        received = self._store.move(
            group,
            LineState.RECEIVED,
            {
                "received_at": dto.received_date or timezone.localdate(),
                "staff_username": dto.staff_username,
            },
        )

        self._audit.append(
            actor_username=dto.staff_username,
            actor_role=dto.actor_role,
            action=(
                f"{dto.actor_role} marked all orders for order group {group_id} as received"
            ),
            affected_id=group_id,
        )
        logger.info(
            "order.group_received",
            order_group_id=group_id,
            count=len(received),
            staff=dto.staff_username,
        )
        return received

    @transaction.atomic
    def cancel_order(self, dto: CancelOrderDTO) -> OrderLine:
        """Cancel one line and return its quantity to stock.

        Customers cancel from Placed; staff and admins from ToReceive.

        Raises:
            InvalidOrderRequest: no reason, or no staff username on a staff
                cancellation.
            OrderLineNotFound: the line is not in the actor's source
                partition (or belongs to another customer).
        """
        if not dto.reason:
            raise InvalidOrderRequest("Cancellation reason is required.")
        if not dto.by_customer and not (dto.staff_username or "").strip():
            raise InvalidOrderRequest("Staff username is required.")

        source = LineState.PLACED if dto.by_customer else LineState.TO_RECEIVE
        line = self._store.get_for_update(source, dto.line_id)
        if line is None or (
            dto.by_customer and dto.username and line.username != dto.username
        ):
            raise OrderLineNotFound(f"Order {dto.line_id} not found.")
        self._check_transition(line.state, LineState.CANCELED)

        self._ledger.increment(line.product_id, line.quantity)
        changes: Dict[str, Any] = {
            "canceled_reason": dto.reason,
            "canceled_at": timezone.localdate(),
        }
        if not dto.by_customer:
            changes["staff_username"] = dto.staff_username.strip()
        canceled = self._store.move([line], LineState.CANCELED, changes)[0]

        if dto.by_customer:
            self._audit.append(
                actor_username=line.username,
                actor_role=AccountRole.CUSTOMER,
                action="Customer canceled the order",
                affected_id=line.product_id,
            )
            self._schedule_cancellation_notice(line.username, str(line.id), dto.reason)
        else:
            self._audit.append(
                actor_username=changes["staff_username"],
                actor_role=dto.actor_role,
                action=f"{dto.actor_role} Canceled Order",
                affected_id=line.product_id,
            )

        logger.info(
            "order.canceled",
            line_id=str(line.id),
            source=source,
            actor_role=str(dto.actor_role),
            restored=line.quantity,
        )
        return canceled

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_lines(self, state: str, username: Optional[str] = None) -> List[Any]:
        """Lines of a partition, optionally for one customer."""
        return self._store.list(state, username=username)

    def list_placed(
        self, username: str, now: Optional[Union[date, datetime]] = None
    ) -> List[OrderLine]:
        """Customer's Placed lines, after advancing the ones that are due."""
        self.advance_to_receivable(now=now, username=username)
        return self._store.list(LineState.PLACED, username=username)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_place_order(dto: PlaceOrderDTO) -> None:
        if not dto.username:
            raise InvalidOrderRequest("Username is required.")
        if not dto.selected_lines:
            raise InvalidOrderRequest("Select at least one cart item.")
        if not dto.payment_method:
            raise InvalidOrderRequest("Payment method is required.")
        line_ids = [choice.line_id for choice in dto.selected_lines]
        if len(line_ids) != len(set(line_ids)):
            raise InvalidOrderRequest("A cart item can only be selected once.")

    @staticmethod
    def _check_transition(current: str, target: str) -> None:
        if target not in VALID_TRANSITIONS.get(current, set()):
            raise InvalidOrderRequest(f"Cannot move an order from {current} to {target}.")

    @staticmethod
    def _snapshot_fields(product: ProductSnapshot) -> Dict[str, Any]:
        """Catalog fields copied onto the Placed line."""
        return {
            "product_id": product.product_id,
            "product_name": product.product_name,
            "color": product.color,
            "size": product.size,
            "image_url": product.image_url,
        }

    def _schedule_order_confirmation(
        self,
        account: Optional[Dict[str, Any]],
        lines: List[OrderLine],
        total: Decimal,
    ) -> None:
        recipient = Recipient.from_account(account)
        if self._notifier is None or recipient is None:
            logger.info("notification.skipped", reason="no_recipient")
            return
        items = [
            ReceiptItem(
                product_name=line.product_name,
                price=line.unit_price,
                quantity=line.quantity,
                payment_method=line.payment_method,
                shipping_date=shipping_label(line.shipping_option),
            )
            for line in lines
        ]
        address = _shipping_address(account)

        def send() -> None:
            try:
                self._notifier.send_order_confirmation(recipient, items, total, address)
            except Exception:
                logger.exception("notification.failed", kind="order_confirmation")

        transaction.on_commit(send)

    def _schedule_cancellation_notice(self, username: str, line_id: str, reason: str) -> None:
        recipient = Recipient.from_account(self._directory.find_account_info(username))
        if self._notifier is None or recipient is None:
            logger.info("notification.skipped", reason="no_recipient")
            return

        def send() -> None:
            try:
                self._notifier.send_cancellation_notice(recipient, line_id, reason)
            except Exception:
                logger.exception("notification.failed", kind="cancellation")

        transaction.on_commit(send)


class CartService:
    """Application service for the customer cart (the Cart partition)."""

    def __init__(
        self,
        line_store: IOrderLineStore,
        ledger: InventoryLedger,
        catalog: IProductCatalog,
        audit_log: Optional[AuditLog] = None,
    ) -> None:
        self._store = line_store
        self._ledger = ledger
        self._catalog = catalog
        self._audit = audit_log

    @transaction.atomic
    def add_to_cart(self, dto: AddToCartDTO) -> CartLine:
        """Add one unit of a product; an existing line gains one unit.

        Raises:
            InvalidOrderRequest: no username.
            ProductNotFound: the product is not in the catalog.
        """
        if not dto.username.strip():
            raise InvalidOrderRequest("Username is required.")
        product = self._catalog.get_product(dto.product_id)
        if product is None:
            raise ProductNotFound(f"Product {dto.product_id} not found.")

        existing = self._store.find_cart_line(dto.username, dto.product_id, for_update=True)
        if existing is not None:
            line = self._store.update_cart_quantity(existing.id, existing.quantity + 1)
        else:
            line = self._store.insert(
                LineState.CART,
                {
                    "username": dto.username,
                    "staff_username": dto.staff_username,
                    "product_id": product.product_id,
                    "product_name": product.product_name,
                    "color": product.color,
                    "size": product.size,
                    "image_url": product.image_url,
                    "unit_price": product.price,
                    "quantity": 1,
                },
            )

        self._record(dto.username, "Add to Cart", dto.product_id)
        logger.info(
            "cart.item_added",
            username=dto.username,
            product_id=dto.product_id,
            quantity=line.quantity,
        )
        return line

    @transaction.atomic
    def update_quantity(self, dto: UpdateCartLineDTO) -> CartLine:
        """Raises ``InvalidOrderRequest`` below 1, ``CartLineNotFound`` if absent."""
        if dto.quantity < 1:
            raise InvalidOrderRequest("Quantity must be at least 1.")
        self._get_own_line(dto.username, dto.line_id)
        line = self._store.update_cart_quantity(dto.line_id, dto.quantity)
        if line is None:
            raise CartLineNotFound()
        self._record(dto.username, "Update Cart Product", line.product_id)
        logger.info("cart.quantity_updated", line_id=str(dto.line_id), quantity=dto.quantity)
        return line

    @transaction.atomic
    def remove(self, username: str, line_id: UUID) -> None:
        line = self._get_own_line(username, line_id)
        self._store.delete(LineState.CART, [line.id])
        self._record(username, "Delete Cart Product", line.product_id)
        logger.info("cart.item_removed", username=username, line_id=str(line_id))

    def get_cart(self, username: str) -> List[CartLine]:
        """Cart lines with ``available_quantity`` attached from the ledger."""
        lines = self._store.list(LineState.CART, username=username)
        for line in lines:
            line.available_quantity = self._ledger.get_quantity(line.product_id)
        return lines

    def _record(self, username: str, action: str, product_id: str) -> None:
        if self._audit is not None:
            self._audit.append(
                actor_username=username,
                actor_role=AccountRole.CUSTOMER,
                action=action,
                affected_id=product_id,
            )

    def _get_own_line(self, username: str, line_id: UUID) -> CartLine:
        line = self._store.get_for_update(LineState.CART, line_id)
        if line is None or line.username != username:
            raise CartLineNotFound()
        return line
