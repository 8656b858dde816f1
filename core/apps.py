# core/apps.py
from django.apps import AppConfig


class CoreConfig(AppConfig):
    name = "core"
    default_auto_field = "django.db.models.BigAutoField"

    def ready(self):
        # Connect the cache invalidation receiver
        from core import signals  # noqa: F401
