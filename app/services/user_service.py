"""
app/services/user_service.py

Purpose: User data management

- Registers users by phone number (idempotent)
- Replaces and reads the saved address book
"""

from typing import Any, Dict, Tuple

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import ResourceNotFoundError, ValidationError
from app.core.logging import get_logger
from app.db import mongo
from app.db.mongo import persistence_errors
from utils.validation_utils import is_blank

logger = get_logger(__name__)


def new_user(phone: str) -> Dict[str, Any]:
    return {
        "_id": ObjectId(),
        "phoneNumber": phone,
        "address": [],
        "orders": [],
        "wishlist": [],
    }


class UserService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.users = db[mongo.USERS]

    async def get_or_create(self, phone: str) -> Tuple[Dict[str, Any], bool]:
        """
        Retrieves an existing user or creates a new one.

        Args:
            phone: User's phone number

        Returns:
            (user, created)
        """
        if is_blank(phone):
            raise ValidationError("Phone number is required")
        phone = phone.strip()

        with persistence_errors("Failed to create user"):
            user = await self.users.find_one({"phoneNumber": phone})
            if user:
                return user, False

            user = new_user(phone)
            try:
                await self.users.insert_one(user)
            except DuplicateKeyError:
                # registered concurrently by another request
                return await self.users.find_one({"phoneNumber": phone}), False

        logger.info("New user created", extra={"phone": phone})
        return user, True

    async def update_address(self, phone: str, address: Any) -> Dict[str, Any]:
        """
        Replaces the user's saved address book.

        Returns:
            Updated user document
        """
        if is_blank(phone) or address is None or address == "":
            raise ValidationError("Phone number and address are required")

        with persistence_errors("Internal server error"):
            user = await self.users.find_one_and_update(
                {"phoneNumber": phone.strip()},
                {"$set": {"address": address}},
                return_document=ReturnDocument.AFTER,
            )

        if user is None:
            raise ResourceNotFoundError("User not found")

        logger.info("Address updated", extra={"phone": phone})
        return user

    async def get_address(self, phone: str) -> Any:
        if is_blank(phone):
            raise ValidationError("Phone number is required")

        with persistence_errors("Internal server error"):
            user = await self.users.find_one({"phoneNumber": phone.strip()}, {"address": 1})

        if user is None:
            raise ResourceNotFoundError("User not found")
        return user.get("address", [])
