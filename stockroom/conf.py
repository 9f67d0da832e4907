"""
Stockroom configuration.

Usage in settings.py:
    STOCKROOM = {
        "DATABASE_ALIAS": "default",
        "CONNECT_MAX_ATTEMPTS": 5,
        "CONNECT_RETRY_DELAY": 3.0,
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class StockroomSettings:
    """Stockroom configuration settings."""

    # Database alias used for every inventory operation
    DATABASE_ALIAS: str = "default"

    # Startup connection attempts before giving up (wait_for_database)
    CONNECT_MAX_ATTEMPTS: int = 5

    # Seconds to sleep between connection attempts
    CONNECT_RETRY_DELAY: float = 3.0


def get_stockroom_settings() -> StockroomSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "STOCKROOM", {})
    return StockroomSettings(**{
        k: v for k, v in user_settings.items()
        if k in StockroomSettings.__dataclass_fields__
    })


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_stockroom_settings(), name)


stockroom_settings = _LazySettings()
