from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler


logger = logging.getLogger(__name__)


class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists"
    default_code = "conflict"


def flatten_errors(detail: Any, field: Optional[str] = None) -> List[Dict[str, Any]]:
    """Turn DRF's nested ``ValidationError.detail`` into ``[{field, message}]``."""
    errors: List[Dict[str, Any]] = []
    if isinstance(detail, dict):
        for key, value in detail.items():
            if field is None:
                name = str(key)
            elif isinstance(key, int):
                name = f"{field}[{key}]"
            else:
                name = f"{field}.{key}"
            errors.extend(flatten_errors(value, name))
    elif isinstance(detail, list):
        for item in detail:
            errors.extend(flatten_errors(item, field))
    else:
        errors.append({"field": field, "message": str(detail)})
    return errors


def _message(detail: Any) -> str:
    if isinstance(detail, dict):
        detail = detail.get("detail", next(iter(detail.values()), ""))
    if isinstance(detail, list):
        detail = detail[0] if detail else ""
    return str(detail)


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    response = exception_handler(exc, context)

    if response is None:
        request = context.get("request")
        logger.exception(
            "Unhandled error on %s %s",
            getattr(request, "method", "-"),
            getattr(request, "path", "-"),
        )
        return Response(
            {"success": False, "message": str(exc) or "Server Error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, ValidationError):
        response.data = {
            "success": False,
            "message": "Validation failed",
            "errors": flatten_errors(exc.detail),
        }
    else:
        response.data = {"success": False, "message": _message(response.data)}
    return response
