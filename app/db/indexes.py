"""
app/db/indexes.py

Purpose: Database index management

- Unique keys the storefront relies on (user phone, coupon code)
- Sort/filter indexes for the listing endpoints
"""

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from app.db import mongo
from app.core.logging import get_logger

logger = get_logger(__name__)


async def create_indexes(db: AsyncIOMotorDatabase):
    """
    Creates all necessary database indexes.
    This function is idempotent - safe to run multiple times.
    """
    try:
        logger.info("Creating database indexes...")

        # USERS: phone number is the user's identity
        await db[mongo.USERS].create_index(
            [("phoneNumber", ASCENDING)], unique=True, name="phone_unique"
        )
        # Positional updates of the embedded order copies
        await db[mongo.USERS].create_index(
            [("phoneNumber", ASCENDING), ("orders._id", ASCENDING)],
            name="phone_order_idx"
        )
        logger.debug("Created indexes on users")

        # ORDERS: admin feed is newest first
        await db[mongo.ORDERS].create_index(
            [("createdAt", DESCENDING)], name="created_desc_idx"
        )
        await db[mongo.ORDERS].create_index(
            [("userPhone", ASCENDING)], name="user_phone_idx"
        )
        logger.debug("Created indexes on orders")

        # PRODUCTS: category listing sorted by recency
        await db[mongo.PRODUCTS].create_index(
            [("secondLevelCategory", ASCENDING), ("createdAt", DESCENDING)],
            name="category_recent_idx"
        )
        logger.debug("Created indexes on shirts")

        await db[mongo.DISCOUNT_CODES].create_index(
            [("code", ASCENDING)], unique=True, name="code_unique"
        )
        await db[mongo.REVIEWS].create_index(
            [("createdAt", DESCENDING)], name="review_created_idx"
        )

        logger.info("✅ All database indexes created successfully")

    except Exception as e:
        logger.error(f"Failed to create indexes: {str(e)}", exc_info=True)
        raise
