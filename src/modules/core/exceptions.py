"""Domain error taxonomy and the DRF exception handler.

Every bounded context derives its own exceptions from the classes below.
The API layer does not translate them one by one: ``api_exception_handler``
(wired through ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``) maps each family to
its HTTP status and renders a ``{"message": ...}`` body.

- ``InvalidRequest`` -> 400
- ``NotFound``       -> 404
- ``Conflict``       -> 409
- anything else      -> 500, logged server-side, generic message.
"""

from __future__ import annotations

from typing import Any, Optional

import structlog
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


class DomainError(Exception):
    """Base class for business rule violations."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Request could not be processed."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidRequest(DomainError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."


class NotFound(DomainError):
    """A referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class Conflict(DomainError):
    """The request clashes with the current state (duplicates, stock floor)."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict."


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    """Render every error as ``{"message": ...}``."""
    if isinstance(exc, DomainError):
        return Response({"message": exc.message}, status=exc.status_code)

    response = exception_handler(exc, context)
    if response is not None:
        body: dict[str, Any] = {"message": _message_for(exc)}
        if isinstance(exc, ValidationError):
            body["errors"] = response.data
        response.data = body
        return response

    view = context.get("view")
    logger.exception(
        "api.unhandled_error",
        view=type(view).__name__ if view is not None else None,
        error=str(exc),
    )
    return Response(
        {"message": "Internal server error."},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _message_for(exc: Exception) -> str:
    if isinstance(exc, ValidationError):
        return "Invalid request data."
    if isinstance(exc, APIException):
        detail = exc.detail
        if isinstance(detail, (list, dict)):
            return str(exc.default_detail)
        return str(detail)
    return str(exc)
