import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class RecordsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "records"
    verbose_name = "PharmaX records"

    def ready(self):
        from records.services import build_stores

        # One bundle per process, shared by every request handler
        self.stores = build_stores()
        logger.debug("Record stores ready: %s", self.stores)
