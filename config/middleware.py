import logging

from django.conf import settings


logger = logging.getLogger(__name__)


class RequestLogMiddleware:
    """Log ``[METHOD] path`` for every request while running in development."""

    def __init__(self, get_response):
        self.get_response = get_response
        self.enabled = settings.APP_ENV == "development"

    def __call__(self, request):
        if self.enabled:
            logger.info("[%s] %s", request.method, request.get_full_path())
        return self.get_response(request)
