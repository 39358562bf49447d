"""
Super-admin Services.
"""

from app.services.pricing_settings_service import PricingSettingsService

__all__ = ["PricingSettingsService"]
