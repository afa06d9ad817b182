"""Order API views.

Exposes ``OrderLifecycleService`` and ``CartService`` via HTTP using DRF
ViewSets.  Domain exceptions propagate to ``api_exception_handler``; the
views never catch generic exceptions.
"""

from __future__ import annotations

from uuid import UUID

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.throttling import BaseThrottle
from rest_framework.viewsets import GenericViewSet

from modules.accounts.models import AccountRole
from modules.orders.constants import PARTITION_SLUGS, LineState
from modules.orders.dtos import (
    AddToCartDTO,
    CancelOrderDTO,
    MarkReceivedDTO,
    PlaceOrderDTO,
    SelectedLineDTO,
    UpdateCartLineDTO,
)
from modules.orders.factories import build_cart_service, build_order_service
from modules.orders.serializers import (
    AddToCartSerializer,
    AdvanceSerializer,
    CancelOrderSerializer,
    CartLineSerializer,
    MarkReceivedSerializer,
    OrderLineSerializer,
    PlaceOrderSerializer,
    RemoveCartLineSerializer,
    StaffCancelOrderSerializer,
    UpdateCartLineSerializer,
)

UUID_REGEX = r"[0-9a-fA-F]{8}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{12}"
PARTITION_REGEX = "|".join(PARTITION_SLUGS)


class OrderViewSet(GenericViewSet):
    """ViewSet for the order lifecycle.

    Does **not** extend ``ModelViewSet``: lines live in several tables and
    all ORM access goes through the service/store layer.
    """

    lookup_value_regex = UUID_REGEX

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = build_order_service()

    def get_throttles(self) -> list[BaseThrottle]:
        """Throttling scope per action."""
        throttle_scope: str | None
        if self.action == "place":
            throttle_scope = "order_creation"
        elif self.action in {"partition", "partition_for_user"}:
            throttle_scope = "order_listing"
        else:
            throttle_scope = None
        self.throttle_scope = throttle_scope
        return super().get_throttles()

    # ------------------------------------------------------------------
    # Checkout
    # ------------------------------------------------------------------

    @action(detail=False, methods=["post"])
    def place(self, request: Request) -> Response:
        """POST /api/v1/orders/place/"""
        serializer = PlaceOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        order_group_id = self._service.place_order(
            PlaceOrderDTO(
                username=data["username"],
                selected_lines=[
                    SelectedLineDTO(line_id=line["line_id"], quantity=line.get("quantity"))
                    for line in data["selected_lines"]
                ],
                payment_method=data["payment_method"],
                shipping_options=data.get("shipping_options") or {},
                shipping_price=data.get("shipping_price"),
                total_price=data.get("total_price"),
            )
        )
        return Response(
            {
                "message": "Order placed successfully.",
                "order_group_id": order_group_id,
            },
            status=status.HTTP_200_OK,
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @action(detail=False, methods=["get"], url_path=rf"(?P<partition>{PARTITION_REGEX})")
    def partition(self, request: Request, partition: str) -> Response:
        """GET /api/v1/orders/{placed|to-receive|received|canceled}/

        Staff view of a whole partition.
        """
        lines = self._service.list_lines(PARTITION_SLUGS[partition])
        return Response(OrderLineSerializer(lines, many=True).data)

    @action(
        detail=False,
        methods=["get"],
        url_path=rf"(?P<partition>{PARTITION_REGEX})/(?P<username>[^/]+)",
    )
    def partition_for_user(
        self, request: Request, partition: str, username: str
    ) -> Response:
        """GET /api/v1/orders/{partition}/{username}/

        For ``placed`` the due lines are first advanced to ToReceive, so
        the response holds only what is still waiting to ship.  An empty
        partition is an empty list, not an error.
        """
        state = PARTITION_SLUGS[partition]
        if state == LineState.PLACED:
            lines = self._service.list_placed(username)
        else:
            lines = self._service.list_lines(state, username=username)
        return Response(OrderLineSerializer(lines, many=True).data)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    @action(detail=False, methods=["post"])
    def advance(self, request: Request) -> Response:
        """POST /api/v1/orders/advance/"""
        serializer = AdvanceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        moved = self._service.advance_to_receivable(
            username=serializer.validated_data.get("username") or None
        )
        return Response(
            {"moved": len(moved), "lines": OrderLineSerializer(moved, many=True).data}
        )

    @action(detail=True, methods=["post"], url_path="move-to-receive")
    def move_to_receive(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/orders/{line_id}/move-to-receive/"""
        line = self._service.move_to_receive(UUID(pk))
        return Response(
            {
                "message": "Order moved to To Receive.",
                "line": OrderLineSerializer(line).data,
            }
        )

    @action(detail=False, methods=["post"], url_path="mark-received")
    def mark_received(self, request: Request) -> Response:
        """POST /api/v1/orders/mark-received/"""
        serializer = MarkReceivedSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        received = self._service.mark_received(
            MarkReceivedDTO(
                line_id=data["line_id"],
                staff_username=data["staff_username"],
                received_date=data.get("received_date"),
                actor_role=data["role"],
            )
        )
        return Response(
            {
                "message": "Orders marked as received.",
                "order_group_id": received[0].order_group_id if received else None,
                "lines": OrderLineSerializer(received, many=True).data,
            }
        )

    @action(detail=True, methods=["post"])
    def cancel(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/orders/{line_id}/cancel/

        Customer cancellation of a Placed line.
        """
        serializer = CancelOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        line = self._service.cancel_order(
            CancelOrderDTO(
                line_id=UUID(pk),
                reason=data["reason"],
                actor_role=AccountRole.CUSTOMER,
                username=data.get("username") or None,
            )
        )
        return Response(
            {
                "message": "Order canceled successfully.",
                "line": OrderLineSerializer(line).data,
            }
        )

    @action(detail=True, methods=["post"], url_path="staff-cancel")
    def staff_cancel(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/orders/{line_id}/staff-cancel/

        Staff or admin cancellation of a ToReceive line.
        """
        serializer = StaffCancelOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        line = self._service.cancel_order(
            CancelOrderDTO(
                line_id=UUID(pk),
                reason=data["reason"],
                actor_role=data["role"],
                staff_username=data["staff_username"],
            )
        )
        return Response(
            {
                "message": "Order canceled successfully.",
                "line": OrderLineSerializer(line).data,
            }
        )


class CartViewSet(GenericViewSet):
    """ViewSet for the customer cart."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = build_cart_service()

    def create(self, request: Request) -> Response:
        """POST /api/v1/cart/"""
        serializer = AddToCartSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        line = self._service.add_to_cart(AddToCartDTO(**serializer.validated_data))
        return Response(
            {
                "message": "Product added to cart.",
                "line": CartLineSerializer(line).data,
            },
            status=status.HTTP_201_CREATED,
        )

    @action(detail=False, methods=["get"], url_path=r"(?P<username>[^/]+)")
    def user_cart(self, request: Request, username: str) -> Response:
        """GET /api/v1/cart/{username}/"""
        lines = self._service.get_cart(username)
        return Response(CartLineSerializer(lines, many=True).data)

    @action(detail=False, methods=["put"], url_path=rf"items/(?P<line_id>{UUID_REGEX})")
    def item(self, request: Request, line_id: str) -> Response:
        """PUT /api/v1/cart/items/{line_id}/"""
        serializer = UpdateCartLineSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        line = self._service.update_quantity(
            UpdateCartLineDTO(
                username=serializer.validated_data["username"],
                line_id=UUID(line_id),
                quantity=serializer.validated_data["quantity"],
            )
        )
        return Response(
            {
                "message": "Cart updated successfully.",
                "line": CartLineSerializer(line).data,
            }
        )

    @item.mapping.delete
    def remove_item(self, request: Request, line_id: str) -> Response:
        """DELETE /api/v1/cart/items/{line_id}/"""
        payload = request.data or request.query_params
        serializer = RemoveCartLineSerializer(data=payload)
        serializer.is_valid(raise_exception=True)
        self._service.remove(serializer.validated_data["username"], UUID(line_id))
        return Response({"message": "Product removed from cart."})
