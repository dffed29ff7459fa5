from __future__ import annotations

import logging

from django.db import DatabaseError, connection
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import render


logger = logging.getLogger(__name__)


def home(request: HttpRequest) -> HttpResponse:
    return render(request, "index.html")


def api_status(request: HttpRequest) -> JsonResponse:
    try:
        connection.ensure_connection()
    except DatabaseError as e:
        logger.error("Database unreachable: %s", e)
        return JsonResponse({"success": False, "message": "Database unavailable"}, status=503)
    return JsonResponse({"success": True, "message": "Blog API is running"})


def not_found(request: HttpRequest, exception: Exception) -> JsonResponse:
    return JsonResponse({"success": False, "message": "Not found"}, status=404)


def server_error(request: HttpRequest) -> JsonResponse:
    return JsonResponse({"success": False, "message": "Server Error"}, status=500)
