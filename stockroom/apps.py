"""Django app configuration for Stockroom."""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class StockroomConfig(AppConfig):
    """Configuration for Stockroom app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "stockroom"
    verbose_name = _("Warehouse Inventory")
