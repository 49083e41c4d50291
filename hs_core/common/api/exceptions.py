# hs_core/common/api/exceptions.py

from __future__ import annotations

import logging
import uuid
from typing import Any

from django.core.exceptions import ObjectDoesNotExist
from django.db import DatabaseError
from django.db.models import ProtectedError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


def ensure_request_id(request) -> str:
    """
    Ensures request has a stable request_id attribute and returns it.
    Safe to call from middleware and DRF exception handler.
    """
    rid = getattr(request, "request_id", None) if request is not None else None
    if not rid:
        rid = uuid.uuid4().hex
        if request is not None:
            setattr(request, "request_id", rid)
    return rid


def build_error_envelope(*, request=None, code: str, message: str, details: Any = None) -> dict[str, Any]:
    """
    Canonical error envelope. `message` is what the UI shows inline.
    """
    rid = ensure_request_id(request)
    return {
        "message": message,
        "code": code,
        "details": details,
        "request_id": rid,
    }


class ConflictError(APIException):
    """
    409 Conflict that still flows through the global exception handler.
    Use for unique-constraint violations and deletes blocked by dependent rows.
    """
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict."
    default_code = "conflict"

    def __init__(self, detail=None, code=None):
        super().__init__(detail=detail or self.default_detail, code=code or self.default_code)


class PersistenceError(APIException):
    """
    Store unreachable or query failure. Detail stays generic; the cause is logged.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "A storage error occurred. Please try again later."
    default_code = "persistence_error"


def _translate(exc: Exception) -> Exception:
    """
    Map Django/ORM failures onto the API taxonomy before DRF renders them.
    """
    if isinstance(exc, ProtectedError):
        return ConflictError("Record is still referenced by other records.")
    if isinstance(exc, ObjectDoesNotExist):
        return NotFound(str(exc) or "Not found.")
    if isinstance(exc, DatabaseError):
        return PersistenceError()
    return exc


def _code_for(exc: Exception, http_status: int) -> str:
    if isinstance(exc, ValidationError):
        return "validation_error"
    if isinstance(exc, Http404):
        return "not_found"
    if isinstance(exc, APIException):
        return getattr(exc, "default_code", "api_error") or "api_error"
    if http_status >= 500:
        return "server_error"
    return "error"


def api_exception_handler(exc: Exception, context: dict[str, Any]):
    request = context.get("request")
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "-"

    translated = _translate(exc)
    if isinstance(translated, PersistenceError):
        logger.error("Storage failure in %s: %s", view_name, exc, exc_info=exc)

    response = drf_exception_handler(translated, context)

    # Truly unhandled error
    if response is None:
        logger.error("Unhandled error in %s", view_name, exc_info=exc)
        return Response(
            build_error_envelope(
                request=request,
                code="server_error",
                message="Unexpected server error.",
                details=None,
            ),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    http_status = response.status_code
    code = _code_for(translated, http_status)

    data = response.data

    # Message + details rules:
    # 1) {"detail": "..."} only -> message=detail, details=None
    # 2) {"detail": "...", ...} -> message=detail, details={...without detail}
    # 3) field errors -> message=first field error, details=data
    message = "Request failed."
    details = data

    if isinstance(data, dict) and "detail" in data:
        detail = data.get("detail")
        if isinstance(detail, list) and detail:
            detail = detail[0]
        message = str(detail)
        rest = {k: v for k, v in data.items() if k != "detail"}
        details = rest or None
    elif isinstance(data, dict) and data:
        field, errors = next(iter(data.items()))
        first = errors[0] if isinstance(errors, list) and errors else errors
        message = f"{field}: {first}"
    elif isinstance(data, list) and data:
        message = str(data[0])

    return Response(
        build_error_envelope(
            request=request,
            code=code,
            message=message,
            details=details,
        ),
        status=http_status,
        headers=response.headers,
    )
