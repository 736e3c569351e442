"""
Database initialization script

Run once (or after adding collections) to create indexes:
    python scripts/init_db.py
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from motor.motor_asyncio import AsyncIOMotorClient
import logging

from app.core.config import settings
from app.db import mongo
from app.db.indexes import create_indexes

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)

COLLECTIONS = [
    mongo.USERS, mongo.ORDERS, mongo.PRODUCTS, mongo.REVIEWS, mongo.CAROUSEL,
    mongo.PRIVACY_POLICIES, mongo.TERMS, mongo.RETURN_POLICY,
    mongo.SHIPPING_INFO, mongo.DISCOUNT_CODES,
]


async def main():
    """Main initialization"""
    logger.info("=" * 60)
    logger.info("  Storefront Database Setup")
    logger.info("=" * 60 + "\n")

    logger.info(f"🔌 Connecting to MongoDB: {settings.MONGODB_DB_NAME}")
    client = AsyncIOMotorClient(settings.MONGO_URI)
    db = client[settings.MONGODB_DB_NAME]

    try:
        await client.admin.command('ping')
        logger.info("✅ Connected successfully\n")

        await create_indexes(db)

        logger.info("\n🔍 Verifying indexes...")
        for name in (mongo.USERS, mongo.ORDERS, mongo.PRODUCTS, mongo.DISCOUNT_CODES):
            indexes = await db[name].index_information()
            logger.info(f"  {name}: {', '.join(i for i in indexes if i != '_id_')}")

        logger.info(f"\n📊 Current documents:")
        for name in COLLECTIONS:
            logger.info(f"  {name}: {await db[name].count_documents({})}")

        logger.info("\n✅ Database initialization complete!")

    except Exception as e:
        logger.error(f"\n❌ Error: {e}")
        raise

    finally:
        client.close()


if __name__ == "__main__":
    asyncio.run(main())
