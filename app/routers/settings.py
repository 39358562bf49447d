"""
FastAPI router for pricing settings endpoints.

Routes are unauthenticated.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.dependencies import get_pricing_settings_service
from app.services.pricing_settings_service import PricingSettingsService
from app.schemas.settings import (
    UPDATE_SUCCESS_MESSAGE,
    UpdatePricingSettingsRequest,
    PricingSettingsResponse,
    UpdatePricingSettingsResponse,
)

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/", response_model=PricingSettingsResponse)
async def get_settings(
    settings_service: Annotated[PricingSettingsService, Depends(get_pricing_settings_service)],
):
    """Get pricing settings, creating the defaults on first access."""
    settings = await settings_service.get_settings()
    return PricingSettingsResponse(**settings)


@router.put("/", response_model=UpdatePricingSettingsResponse)
async def update_settings(
    request: UpdatePricingSettingsRequest,
    settings_service: Annotated[PricingSettingsService, Depends(get_pricing_settings_service)],
):
    """Update the prices present in the request body."""
    settings = await settings_service.update_settings(
        price_per_client=request.pricePerClient,
        restaurant_price=request.restaurantPrice,
    )
    return UpdatePricingSettingsResponse(
        message=UPDATE_SUCCESS_MESSAGE,
        settings=PricingSettingsResponse(**settings),
    )
