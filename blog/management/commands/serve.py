import logging
import sys

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand
from django.db import DatabaseError, connection


logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Check the database connection, then serve the API on $PORT."

    def add_arguments(self, parser):
        parser.add_argument("--port", type=int, default=settings.PORT)
        parser.add_argument("--host", default="0.0.0.0")

    def handle(self, *args, **options):
        try:
            connection.ensure_connection()
        except DatabaseError as e:
            logger.critical("Database connection failed: %s", e)
            sys.exit(1)
        logger.info("Database connected: %s", connection.settings_dict["NAME"])

        logger.info("Server running in %s mode on port %s", settings.APP_ENV, options["port"])
        call_command(
            "runserver",
            f"{options['host']}:{options['port']}",
            use_reloader=settings.APP_ENV == "development",
        )
