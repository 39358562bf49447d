"""
Super-admin application settings.

Extends the base settings with pricing-service configuration.
"""

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Super-admin specific settings."""

    # ==========================================================================
    # Application Settings
    # ==========================================================================
    APP_NAME: str = "Gym Super-Admin API"
    APP_VERSION: str = "1.0.0"

    # Collection holding the pricing settings singleton
    SETTINGS_COLLECTION: str = "settings"


settings = Settings()
