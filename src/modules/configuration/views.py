"""VAT configuration endpoint.

``value`` is read straight from the JSON body and validated by the
service, which only accepts JSON numbers.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.audit.factories import build_audit_log
from modules.configuration.repositories.django_repository import VatDjangoRepository
from modules.configuration.serializers import VatSettingSerializer
from modules.configuration.services import VatService


class VatSettingView(APIView):
    """GET/POST/PUT /api/v1/admin/vat/"""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = VatService(VatDjangoRepository(), audit_log=build_audit_log())

    def _admin_username(self, request: Request) -> str:
        return request.data.get("admin_username") or request.user.get_username()

    def get(self, request: Request) -> Response:
        vat = self._service.get_vat()
        if vat is None:
            return Response({})
        return Response(VatSettingSerializer(vat).data)

    def post(self, request: Request) -> Response:
        vat = self._service.create_vat(
            request.data.get("value"), admin_username=self._admin_username(request)
        )
        return Response(
            {"message": "VAT added successfully.", "vat": VatSettingSerializer(vat).data},
            status=status.HTTP_201_CREATED,
        )

    def put(self, request: Request) -> Response:
        vat = self._service.update_vat(
            request.data.get("value"), admin_username=self._admin_username(request)
        )
        return Response(
            {"message": "VAT updated successfully.", "vat": VatSettingSerializer(vat).data}
        )
