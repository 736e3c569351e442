"""
app/services/content_service.py

Purpose: Read-only storefront content

- Carousel images, policy pages, terms, shipping info, discount codes
- `add` validates and stores a content document (used by the seeding script)
"""

from typing import Any, Dict, List

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from app.core.exceptions import ResourceNotFoundError, ValidationError
from app.core.logging import get_logger
from app.db import mongo
from app.db.mongo import persistence_errors
from app.schemas.content import CarouselImage, DiscountCode, PolicySection, TermsSection
from utils.time_utils import utcnow

logger = get_logger(__name__)

# content kind -> (collection, schema, timestamped)
CONTENT_KINDS: Dict[str, tuple] = {
    "carousel": (mongo.CAROUSEL, CarouselImage, False),
    "privacy-policy": (mongo.PRIVACY_POLICIES, PolicySection, True),
    "terms": (mongo.TERMS, TermsSection, True),
    "return-policy": (mongo.RETURN_POLICY, PolicySection, True),
    "shipping-info": (mongo.SHIPPING_INFO, PolicySection, True),
    "discounts": (mongo.DISCOUNT_CODES, DiscountCode, False),
}


class ContentService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    async def _all(self, collection: str, error_message: str) -> List[Dict[str, Any]]:
        with persistence_errors(error_message):
            return await self.db[collection].find().to_list(length=None)

    async def carousel(self) -> List[Dict[str, Any]]:
        images = await self._all(mongo.CAROUSEL, "Internal Server Error")
        if not images:
            raise ResourceNotFoundError("No images found")
        return images

    async def privacy_policy(self) -> List[Dict[str, Any]]:
        return await self._all(mongo.PRIVACY_POLICIES, "Failed to fetch privacy policy data")

    async def terms(self) -> List[Dict[str, Any]]:
        return await self._all(mongo.TERMS, "Failed to fetch terms and conditions")

    async def return_policy(self) -> List[Dict[str, Any]]:
        return await self._all(mongo.RETURN_POLICY, "Failed to fetch return policy data")

    async def shipping_info(self) -> List[Dict[str, Any]]:
        return await self._all(mongo.SHIPPING_INFO, "Failed to fetch shipping info")

    async def discounts(self) -> List[Dict[str, Any]]:
        discounts = await self._all(mongo.DISCOUNT_CODES, "Failed to fetch discounts")
        logger.debug(f"Fetched {len(discounts)} discount codes")
        return discounts

    async def add(self, kind: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validates a content document against its schema and stores it.

        Args:
            kind: One of CONTENT_KINDS
            data: Raw document (camelCase keys)

        Returns:
            Stored document
        """
        if kind not in CONTENT_KINDS:
            raise ValidationError(f"Unknown content kind: {kind}")

        collection, schema, timestamped = CONTENT_KINDS[kind]
        try:
            document = schema.model_validate(data).to_document()
        except ValueError as e:
            raise ValidationError(f"Invalid {kind} document", details=str(e)) from e

        document["_id"] = ObjectId()
        if timestamped:
            document.setdefault("createdAt", utcnow())

        with persistence_errors(f"Failed to store {kind} document"):
            await self.db[collection].insert_one(document)

        return document
