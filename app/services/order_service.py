"""
app/services/order_service.py

Purpose: Order lifecycle management

- Creates orders at checkout
- Mirrors each order into the owning user's `orders` array
- Applies status / tracking link changes to both copies

The user's `orders` array is a denormalized copy of the `orders`
collection. Every write touches the authoritative document first and the
user's copy second; the two writes are independent. If the second one
misses (no user, or the copy is not in the array) the first is kept and
the caller gets a NotFound, so the copies can diverge until the next
successful update.
"""

from typing import Any, Dict, List, Tuple

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING, ReturnDocument

from app.core.exceptions import ResourceNotFoundError
from app.core.logging import get_logger, LogContext
from app.db import mongo
from app.db.mongo import persistence_errors
from app.schemas.order import OrderCreate, OrderStatusUpdate
from utils.time_utils import utcnow
from utils.validation_utils import parse_object_id

logger = get_logger(__name__)


class OrderService:
    """Service for the order lifecycle and the user-side order mirror."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.orders = db[mongo.ORDERS]
        self.users = db[mongo.USERS]

    async def create_order(self, payload: OrderCreate) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        """
        Persists a new order and appends it to the owner's order list.

        Args:
            payload: Validated checkout payload

        Returns:
            (order, user) after both writes

        Raises:
            ResourceNotFoundError: No user has `payload.user_phone`. The order
                is already stored at this point and is left in place.
        """
        order = payload.to_document()
        order["_id"] = ObjectId()
        order["createdAt"] = utcnow()

        with LogContext(phone=payload.user_phone, order_id=str(order["_id"])):
            with persistence_errors("Failed to confirm order. Please try again."):
                await self.orders.insert_one(order)
                logger.info(
                    f"Order saved ({payload.payment_method}, total={payload.total_amount})"
                )

                user = await self.users.find_one_and_update(
                    {"phoneNumber": payload.user_phone},
                    {"$push": {"orders": order}},
                    return_document=ReturnDocument.AFTER,
                )

            if user is None:
                logger.warning("Order saved but no user owns this phone number")
                raise ResourceNotFoundError("User not found")

            logger.info("Order mirrored into user record")

        return order, user

    async def list_orders(self) -> List[Dict[str, Any]]:
        """Every order, newest first."""
        with persistence_errors("Failed to fetch orders"):
            cursor = self.orders.find().sort("createdAt", DESCENDING)
            return await cursor.to_list(length=None)

    async def list_user_orders(self, phone: str) -> List[Dict[str, Any]]:
        """
        Returns the user's stored order copies as they sit in the array.
        This is not a join against the orders collection.
        """
        with persistence_errors("Failed to fetch orders. Please try again."):
            user = await self.users.find_one(
                {"phoneNumber": phone.strip()}, {"orders": 1}
            )

        if user is None:
            raise ResourceNotFoundError("User not found")

        orders = user.get("orders", [])
        logger.debug(f"Fetched {len(orders)} orders", extra={"phone": phone})
        return orders

    async def update_order_status(
        self,
        order_id: str,
        update: OrderStatusUpdate,
    ) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        """
        Updates status (and tracking link, when a non-empty one is given)
        on the order, then on the matching copy in the owner's array.

        Args:
            order_id: Hex id of the order
            update: New status and optional tracking link

        Returns:
            (order, user) after both writes

        Raises:
            ResourceNotFoundError: Unknown order id, or no user array entry
                matches. In the second case the order itself stays updated.
        """
        oid = parse_object_id(order_id)
        if oid is None:
            raise ResourceNotFoundError("Order not found")

        changes = {"status": update.status}
        if update.tracking_link:
            changes["trackingLink"] = update.tracking_link

        with LogContext(order_id=order_id):
            with persistence_errors("Failed to update order. Please try again."):
                order = await self.orders.find_one_and_update(
                    {"_id": oid},
                    {"$set": changes},
                    return_document=ReturnDocument.AFTER,
                )
                if order is None:
                    raise ResourceNotFoundError("Order not found")

                logger.info(f"Order status set to '{update.status}'")

                # Copy the order's resulting values so both sides agree even
                # when no tracking link was supplied in this update.
                result = await self.users.update_one(
                    {"phoneNumber": order["userPhone"], "orders._id": oid},
                    {
                        "$set": {
                            "orders.$.status": order.get("status", ""),
                            "orders.$.trackingLink": order.get("trackingLink", ""),
                        }
                    },
                )

                if result.matched_count == 0:
                    logger.warning(
                        "Order updated but the user's copy was not found",
                        extra={"phone": order["userPhone"]},
                    )
                    raise ResourceNotFoundError("User not found")

                user = await self.users.find_one({"phoneNumber": order["userPhone"]})

        return order, user
