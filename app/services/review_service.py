from typing import Any, Dict, List

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.logging import get_logger
from app.db import mongo
from app.db.mongo import persistence_errors
from app.schemas.review import ReviewCreate
from utils.time_utils import utcnow

logger = get_logger(__name__)


class ReviewService:
    """Store reviews (not tied to a product or user)."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.reviews = db[mongo.REVIEWS]

    async def list(self) -> List[Dict[str, Any]]:
        with persistence_errors("Failed to fetch reviews"):
            return await self.reviews.find().to_list(length=None)

    async def create(self, payload: ReviewCreate) -> Dict[str, Any]:
        review = payload.to_document()
        review.update({"_id": ObjectId(), "createdAt": utcnow()})

        with persistence_errors("Failed to add review"):
            await self.reviews.insert_one(review)

        logger.info(f"Review added ({review['rating']}/5)")
        return review
