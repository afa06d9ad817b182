"""Inventory API views.

Exposes stock look-ups, staff restocks and supplier deliveries.  Domain exceptions propagate
to ``api_exception_handler``.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.audit.factories import build_audit_log
from modules.inventory.dtos import AddDeliveryDTO, RestockDTO
from modules.inventory.repositories.django_repository import (
    DeliveryDjangoRepository,
    StockDjangoRepository,
)
from modules.inventory.serializers import (
    AddDeliverySerializer,
    DeliverSerializer,
    DeliverySerializer,
    RestockSerializer,
    StockSerializer,
)
from modules.inventory.services import DeliveryService, InventoryLedger


class StockViewSet(GenericViewSet):
    """Stock ledger endpoints keyed by ``product_id``."""

    lookup_field = "product_id"
    lookup_value_regex = r"[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._ledger = InventoryLedger(
            stock_repository=StockDjangoRepository(),
            audit_log=build_audit_log(),
        )

    def retrieve(self, request: Request, product_id: str | None = None) -> Response:
        """GET /api/v1/stock/{product_id}/"""
        stock = self._ledger.get_stock(product_id or "")
        return Response(StockSerializer(stock).data)

    @action(detail=True, methods=["post"])
    def restock(self, request: Request, product_id: str | None = None) -> Response:
        """POST /api/v1/stock/{product_id}/restock/"""
        serializer = RestockSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        stock = self._ledger.restock(
            RestockDTO(
                product_id=product_id or "",
                quantity=serializer.validated_data["quantity"],
                staff_username=serializer.validated_data["staff_username"],
            )
        )
        return Response(StockSerializer(stock).data, status=status.HTTP_200_OK)


class DeliveryViewSet(GenericViewSet):
    """Supplier delivery intake and receipt into stock."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        audit_log = build_audit_log()
        stock_repository = StockDjangoRepository()
        self._service = DeliveryService(
            delivery_repository=DeliveryDjangoRepository(),
            stock_repository=stock_repository,
            ledger=InventoryLedger(stock_repository=stock_repository),
            audit_log=audit_log,
        )

    def list(self, request: Request) -> Response:
        """GET /api/v1/deliveries/ (pending, newest first)"""
        deliveries = self._service.list_pending()
        return Response(DeliverySerializer(deliveries, many=True).data)

    def create(self, request: Request) -> Response:
        """POST /api/v1/deliveries/"""
        serializer = AddDeliverySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        delivery = self._service.add_delivery(AddDeliveryDTO(**serializer.validated_data))
        return Response(
            {
                "message": "Delivery added successfully.",
                "delivery": DeliverySerializer(delivery).data,
            },
            status=status.HTTP_201_CREATED,
        )

    @action(detail=True, methods=["post"])
    def deliver(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/deliveries/{id}/deliver/"""
        serializer = DeliverSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        delivery = self._service.set_as_delivered(
            pk,
            staff_username=serializer.validated_data["staff_username"],
            actor_role=serializer.validated_data["role"],
        )
        return Response(
            {
                "message": "Set as delivered, added to stock, and logged to history.",
                "delivery": DeliverySerializer(delivery).data,
            }
        )

    @action(detail=False, methods=["post"], url_path="deliver-all")
    def deliver_all(self, request: Request) -> Response:
        """POST /api/v1/deliveries/deliver-all/"""
        serializer = DeliverSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        delivered = self._service.set_all_delivered(
            staff_username=serializer.validated_data["staff_username"],
            actor_role=serializer.validated_data["role"],
        )
        return Response(
            {
                "message": "All deliveries marked as delivered and moved to stock.",
                "count": len(delivered),
            }
        )

    @action(detail=False, methods=["get"])
    def history(self, request: Request) -> Response:
        """GET /api/v1/deliveries/history/"""
        deliveries = self._service.list_history()
        return Response(DeliverySerializer(deliveries, many=True).data)
