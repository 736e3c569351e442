"""
app/api/orders.py

Purpose: Order endpoints

- POST  /orders/confirm       checkout
- GET   /orders/new           admin feed, newest first
- GET   /orders/{user_phone}  the user's stored order copies
- PATCH /orders/update/{id}   status / tracking link change
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from app.api.deps import get_order_service
from app.schemas.order import OrderCreate, OrderStatusUpdate
from app.services.order_service import OrderService
from utils.serialization import serialize_document, serialize_documents
from utils.time_utils import format_order_date

router = APIRouter(prefix="/orders")


def order_view(order: Dict[str, Any]) -> Dict[str, Any]:
    """Authoritative order as returned to clients, with a display date."""
    view = serialize_document(order)
    view["formattedDate"] = format_order_date(order.get("createdAt"))
    return view


@router.post("/confirm", status_code=status.HTTP_201_CREATED)
async def confirm_order(
    payload: OrderCreate,
    orders: OrderService = Depends(get_order_service),
):
    order, user = await orders.create_order(payload)
    return {
        "message": "Order confirmed successfully!",
        "order": order_view(order),
        "user": serialize_document(user),
    }


@router.get("/new")
async def list_new_orders(orders: OrderService = Depends(get_order_service)):
    return [order_view(order) for order in await orders.list_orders()]


@router.get("/{user_phone}")
async def list_user_orders(
    user_phone: str,
    orders: OrderService = Depends(get_order_service),
):
    return {"orders": serialize_documents(await orders.list_user_orders(user_phone))}


@router.patch("/update/{order_id}")
async def update_order(
    order_id: str,
    payload: OrderStatusUpdate,
    orders: OrderService = Depends(get_order_service),
):
    order, user = await orders.update_order_status(order_id, payload)
    return {
        "message": "Order updated successfully!",
        "order": order_view(order),
        "user": serialize_document(user),
    }
