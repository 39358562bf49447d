"""
FastAPI dependencies for the super-admin application.

Services are built once at startup and kept on app.state; routes receive
them through Depends() so tests can swap them with dependency_overrides.
"""

from fastapi import FastAPI, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from common.utils.exceptions import ServiceUnavailableException
from app.services.pricing_settings_service import PricingSettingsService


def init_settings_services(
    app: FastAPI,
    db: AsyncIOMotorDatabase,
    collection_name: str = "settings",
) -> None:
    """
    Initialize settings services with a database connection.

    Called once at application startup.

    Args:
        app: FastAPI application that will own the services
        db: MongoDB database connection
        collection_name: Collection holding the pricing settings document
    """
    app.state.pricing_settings_service = PricingSettingsService(
        db=db,
        collection_name=collection_name,
    )


def get_pricing_settings_service(request: Request) -> PricingSettingsService:
    """Get pricing settings service instance."""
    service = getattr(request.app.state, "pricing_settings_service", None)
    if service is None:
        raise ServiceUnavailableException(
            message="Settings services not initialized",
            code="SERVICE_NOT_INITIALIZED",
        )
    return service
