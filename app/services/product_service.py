"""
app/services/product_service.py

Purpose: Product catalog

- Adds products (with createdAt/updatedAt timestamps)
- Lists products, newest first, optionally by second-level category
- Fetches a single product by id
"""

from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING

from app.core.exceptions import ResourceNotFoundError
from app.core.logging import get_logger
from app.db import mongo
from app.db.mongo import persistence_errors
from app.schemas.product import ProductCreate
from utils.time_utils import utcnow
from utils.validation_utils import parse_object_id

logger = get_logger(__name__)


class ProductService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.products = db[mongo.PRODUCTS]

    async def create(self, payload: ProductCreate) -> Dict[str, Any]:
        product = payload.to_document()
        now = utcnow()
        product.update({"_id": ObjectId(), "createdAt": now, "updatedAt": now})

        with persistence_errors("Failed to add product"):
            await self.products.insert_one(product)

        logger.info(f"Product added: {product['title']}")
        return product

    async def list(self, category: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Lists products, newest first.

        Args:
            category: Optional second-level category (case-insensitive)
        """
        query = {}
        if category and category.strip():
            query["secondLevelCategory"] = category.strip().lower()

        with persistence_errors("Failed to fetch shirt data"):
            cursor = self.products.find(query).sort("createdAt", DESCENDING)
            return await cursor.to_list(length=None)

    async def get(self, product_id: str) -> Dict[str, Any]:
        oid = parse_object_id(product_id)
        if oid is None:
            raise ResourceNotFoundError("Shirt not found")

        with persistence_errors("Failed to fetch shirt data"):
            product = await self.products.find_one({"_id": oid})

        if product is None:
            raise ResourceNotFoundError("Shirt not found")
        return product
