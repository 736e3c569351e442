"""
Content seeding script

Loads storefront content (carousel, policies, terms, discounts) from a JSON
file whose top-level keys are content kinds:

    {
        "carousel": [{"imageUrl": "https://.../hero.jpg", "alt": "Festive"}],
        "privacy-policy": [{"sectionTitle": "...", "content": "..."}],
        "terms": [{"title": "...", "description": "..."}],
        "discounts": [{"code": "WELCOME10", "discountPercentage": 10}]
    }

Usage:
    python scripts/seed_content.py content.json
"""

import asyncio
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from motor.motor_asyncio import AsyncIOMotorClient
import logging

from app.core.config import settings
from app.core.exceptions import StoreError
from app.services.content_service import CONTENT_KINDS, ContentService

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


async def seed(path: Path) -> int:
    data = json.loads(path.read_text(encoding="utf-8"))
    unknown = set(data) - set(CONTENT_KINDS)
    if unknown:
        raise SystemExit(f"❌ Unknown content kinds: {', '.join(sorted(unknown))}")

    client = AsyncIOMotorClient(settings.MONGO_URI)
    service = ContentService(client[settings.MONGODB_DB_NAME])
    stored = 0

    try:
        for kind, documents in data.items():
            for document in documents:
                try:
                    await service.add(kind, document)
                    stored += 1
                except StoreError as e:
                    logger.error(f"  ❌ {kind}: {e.message} {e.details or ''}")
            logger.info(f"✅ {kind}: {len(documents)} processed")
    finally:
        client.close()

    return stored


if __name__ == "__main__":
    if len(sys.argv) != 2:
        raise SystemExit("Usage: python scripts/seed_content.py <content.json>")
    count = asyncio.run(seed(Path(sys.argv[1])))
    logger.info(f"📊 Stored {count} documents")
