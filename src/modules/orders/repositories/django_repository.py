"""Django ORM implementation of the order line store.

Implements ``IOrderLineStore`` using the partition models.  All ORM queries
for order lines are encapsulated here; the Service Layer never touches
the ORM directly.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional
from uuid import UUID

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from modules.orders.constants import LineState
from modules.orders.models import PARTITION_MODELS, CartLine, OrderLine
from modules.orders.repositories.interfaces import IOrderLineStore

logger = structlog.get_logger(__name__)

# Managed by the ORM on insert; never copied between partitions.
_TIMESTAMP_FIELDS = {"created_at", "updated_at"}


class OrderLineDjangoStore(IOrderLineStore):
    """Concrete store backed by one table per partition."""

    def _model(self, state: str):
        try:
            return PARTITION_MODELS[state]
        except KeyError:
            raise ValueError(f"Unknown order line state: {state!r}") from None

    # -- reads -------------------------------------------------------------

    def get(self, state: str, line_id: UUID) -> Optional[Any]:
        try:
            return self._model(state).objects.filter(id=line_id).first()
        except (ValueError, ValidationError):
            return None

    def get_for_update(self, state: str, line_id: UUID) -> Optional[Any]:
        try:
            return (
                self._model(state)
                .objects.select_for_update()
                .filter(id=line_id)
                .first()
            )
        except (ValueError, ValidationError):
            return None

    def list(
        self,
        state: str,
        username: Optional[str] = None,
        for_update: bool = False,
    ) -> List[Any]:
        qs = self._model(state).objects.all()
        if for_update:
            qs = qs.select_for_update()
        if username:
            qs = qs.filter(username=username)
        return list(qs)

    def list_group(
        self, state: str, order_group_id: str, for_update: bool = False
    ) -> List[OrderLine]:
        qs = self._model(state).objects.filter(order_group_id=order_group_id)
        if for_update:
            qs = qs.select_for_update()
        return list(qs)

    # -- writes ------------------------------------------------------------

    def insert(self, state: str, data: Dict[str, Any]) -> Any:
        line = self._model(state)(**data)
        line.save()
        return line

    @transaction.atomic
    def delete(self, state: str, line_ids: Iterable[UUID]) -> int:
        deleted, _ = self._model(state).objects.filter(id__in=list(line_ids)).delete()
        return deleted

    @transaction.atomic
    def move(
        self,
        lines: List[Any],
        destination: str,
        changes: Optional[Dict[str, Any]] = None,
    ) -> List[OrderLine]:
        if not lines:
            return []
        target = self._model(destination)
        columns = [
            field.attname
            for field in target._meta.concrete_fields
            if field.attname not in _TIMESTAMP_FIELDS
        ]

        copies = []
        by_source: Dict[str, List[UUID]] = defaultdict(list)
        for line in lines:
            data = {name: getattr(line, name) for name in columns if hasattr(line, name)}
            data.update(changes or {})
            copies.append(target(**data))
            by_source[line.state].append(line.id)

        target.objects.bulk_create(copies)
        for source, ids in by_source.items():
            self._model(source).objects.filter(id__in=ids).delete()

        logger.info(
            "order.lines_moved",
            destination=destination,
            sources=sorted(by_source),
            count=len(copies),
        )
        return copies

    # -- cart --------------------------------------------------------------

    def find_cart_line(
        self, username: str, product_id: str, for_update: bool = False
    ) -> Optional[CartLine]:
        qs = CartLine.objects.filter(username=username, product_id=product_id)
        if for_update:
            qs = qs.select_for_update()
        return qs.first()

    def update_cart_quantity(self, line_id: UUID, quantity: int) -> Optional[CartLine]:
        updated = CartLine.objects.filter(id=line_id).update(
            quantity=quantity, updated_at=timezone.now()
        )
        if not updated:
            return None
        return self.get(LineState.CART, line_id)
