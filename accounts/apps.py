from django.apps import AppConfig


class AccountsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "accounts"

    def ready(self):
        # registers the OpenAPI security scheme for bearer tokens
        from . import schema  # noqa: F401
