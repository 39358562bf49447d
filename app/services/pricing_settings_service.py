"""
Pricing settings service.

Keeps the single global pricing configuration: the per-client gym tariff
and the per-client restaurant add-on tariff.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Optional, Dict, Any

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from common.utils.exceptions import ValidationException

logger = logging.getLogger(__name__)

SETTINGS_KEY = "main_settings"

DEFAULT_PRICES = {
    "pricePerClient": 0,
    "restaurantPrice": 0,
}


class PricingSettingsService:
    """
    Reads and updates the pricing settings singleton.

    The document lives under the fixed _id SETTINGS_KEY. Reads only write when
    the document is missing, and every write is a single upsert, so concurrent
    first calls converge on one document.
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "settings"):
        """
        Initialize PricingSettingsService.

        Args:
            db: MongoDB database connection
            collection_name: Collection holding the settings document
        """
        self._db = db
        self._collection = db[collection_name]

    async def get_settings(self) -> Dict[str, Any]:
        """
        Get pricing settings (creates defaults if none).

        Returns:
            Pricing settings dict
        """
        settings = await self._collection.find_one({"_id": SETTINGS_KEY})

        if not settings:
            now = datetime.now(timezone.utc)
            settings = await self._upsert(
                {"$setOnInsert": {**DEFAULT_PRICES, "createdAt": now, "updatedAt": now}}
            )
            logger.info("Created default pricing settings")

        logger.debug(f"Loaded pricing settings: {settings.get('_id')}")
        return self._format_settings(settings)

    async def update_settings(
        self,
        price_per_client: Optional[float] = None,
        restaurant_price: Optional[float] = None,
    ) -> Dict[str, Any]:
        """
        Update pricing settings.

        Only the prices that are passed are written; None leaves the stored
        value untouched. A zero is a real value and is written.

        Args:
            price_per_client: New per-client gym tariff
            restaurant_price: New per-client restaurant tariff

        Returns:
            Updated settings dict
        """
        now = datetime.now(timezone.utc)
        provided = {
            "pricePerClient": price_per_client,
            "restaurantPrice": restaurant_price,
        }

        updates: Dict[str, Any] = {"updatedAt": now}
        on_insert: Dict[str, Any] = {"createdAt": now}

        for field, value in provided.items():
            if value is None:
                on_insert[field] = DEFAULT_PRICES[field]
                continue
            self._validate_price(field, value)
            updates[field] = value

        settings = await self._upsert({"$set": updates, "$setOnInsert": on_insert})

        changed = [field for field in provided if field in updates]
        logger.info(f"Updated pricing settings fields: {changed or 'none'}")
        return self._format_settings(settings)

    async def _upsert(self, update: Dict[str, Any]) -> Dict[str, Any]:
        try:
            return await self._find_one_and_upsert(update)
        except DuplicateKeyError:
            # Lost the insert race on _id; the document exists now.
            logger.warning("Concurrent pricing settings insert detected, retrying")
            return await self._find_one_and_upsert(update)

    async def _find_one_and_upsert(self, update: Dict[str, Any]) -> Dict[str, Any]:
        return await self._collection.find_one_and_update(
            {"_id": SETTINGS_KEY},
            update,
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )

    def _validate_price(self, field: str, value: Any) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationException(
                message=f"{field} must be a number",
                code="INVALID_PRICE",
            )
        if not math.isfinite(value) or value < 0:
            raise ValidationException(
                message=f"{field} must be a non-negative number",
                code="INVALID_PRICE",
            )

    def _format_settings(self, settings: Dict[str, Any]) -> Dict[str, Any]:
        """Format settings for response."""
        return {
            "id": str(settings.get("_id", "")),
            "pricePerClient": settings.get("pricePerClient", DEFAULT_PRICES["pricePerClient"]),
            "restaurantPrice": settings.get("restaurantPrice", DEFAULT_PRICES["restaurantPrice"]),
            "createdAt": settings.get("createdAt"),
            "updatedAt": settings.get("updatedAt"),
        }
