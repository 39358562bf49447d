"""
Pydantic models for pricing settings request/response validation.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


UPDATE_SUCCESS_MESSAGE = "Configuración de precios actualizada exitosamente."


class UpdatePricingSettingsRequest(BaseModel):
    """Request to update pricing settings. Omitted or null fields are left unchanged."""
    pricePerClient: Optional[float] = Field(None, ge=0, allow_inf_nan=False, strict=True)
    restaurantPrice: Optional[float] = Field(None, ge=0, allow_inf_nan=False, strict=True)


class PricingSettingsResponse(BaseModel):
    """Pricing settings in API responses."""
    id: str
    pricePerClient: float = 0
    restaurantPrice: float = 0
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


class UpdatePricingSettingsResponse(BaseModel):
    """Envelope returned after an update."""
    message: str = UPDATE_SUCCESS_MESSAGE
    settings: PricingSettingsResponse
