"""
bogla.exceptions

Error taxonomy shared by every API view, and the DRF exception handler that
renders it. Response envelope (consistent):

  { "ok": false, "error": { "type": ..., "message": ..., "details": {...} } }

- validation_error  400  malformed input, field-level details
- unauthorized      401  missing/invalid seller token
- not_found         404  unknown record OR another seller's record
- upstream_error    500  persistence/media CDN failure (logged, never echoed)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from django.core.exceptions import PermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger("bogla")

GENERIC_SERVER_MESSAGE = "Something went wrong. Please try again later."


class NotFound(exceptions.NotFound):
    """Lookup miss. Cross-seller access raises this too, so existence never leaks."""

    def __init__(self, what: str = "Resource"):
        super().__init__(detail=f"{what} not found")


class Unauthorized(exceptions.APIException):
    """Bad credentials on a public endpoint (login); always a 401."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized"
    default_code = "unauthorized"


class UpstreamFailure(exceptions.APIException):
    """Persistence or media CDN failure; the original error is only logged."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = GENERIC_SERVER_MESSAGE
    default_code = "upstream_error"


def _error_type(exc: Exception) -> str:
    if isinstance(exc, (exceptions.ValidationError, exceptions.ParseError, exceptions.UnsupportedMediaType)):
        return "validation_error"
    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed, Unauthorized)):
        return "unauthorized"
    if isinstance(exc, (exceptions.NotFound, Http404)):
        return "not_found"
    if isinstance(exc, (exceptions.PermissionDenied, PermissionDenied)):
        return "forbidden"
    if isinstance(exc, exceptions.MethodNotAllowed):
        return "method_not_allowed"
    if isinstance(exc, UpstreamFailure):
        return "upstream_error"
    return "error"


def error_payload(err_type: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Uniform structured error payload (no secrets)."""
    return {
        "ok": False,
        "error": {
            "type": err_type,
            "message": message,
            "details": details or {},
        },
    }


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception(
            "unhandled_api_error view=%s",
            view.__class__.__name__ if view is not None else "-",
        )
        return Response(
            error_payload("upstream_error", GENERIC_SERVER_MESSAGE),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    err_type = _error_type(exc)
    data = response.data

    if err_type == "validation_error":
        if isinstance(data, dict) and set(data) != {"detail"}:
            message, details = "Validation error", data
        elif isinstance(data, list):
            message, details = "Validation error", {"non_field_errors": data}
        else:
            message, details = str(data.get("detail", "Validation error")), {}
    else:
        message = str(data.get("detail", "")) if isinstance(data, dict) else str(data)
        details = {}

    response.data = error_payload(err_type, message, details)
    return response
