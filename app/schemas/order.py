"""
app/schemas/order.py

Purpose: Order request payloads

- Checkout payload (POST /api/orders/confirm)
- Status update payload (PATCH /api/orders/update/{id})
- Payment id rule: required for every method except cash on delivery
"""

from pydantic import ConfigDict, Field, model_validator
from typing import Any, Dict, List, Optional

from app.schemas.base import StoreModel

CASH_ON_DELIVERY = "cod"


class OrderCreate(StoreModel):
    """
    Checkout payload. Address and cart items are stored as snapshots,
    so their inner shape is left to the storefront.
    """
    user_phone: str = Field(..., min_length=1, description="Owning user's phone number")
    address: Dict[str, Any] = Field(..., description="Shipping address snapshot")
    cart_items: List[Dict[str, Any]] = Field(..., description="Cart snapshot")
    total_amount: float = Field(..., ge=0, description="Order total")
    payment_method: str = Field(..., min_length=1, description="e.g. 'cod', 'razorpay'")
    payment_id: Optional[str] = Field(None, description="Gateway payment id")
    tracking_link: str = Field("", description="Courier tracking URL")
    status: str = Field("", description="Free-text order status")

    @model_validator(mode="after")
    def check_payment_id(self):
        if self.is_cash_on_delivery:
            # never stored for cod orders
            self.payment_id = None
        elif not self.payment_id:
            raise ValueError("paymentId is required unless paymentMethod is 'cod'")
        return self

    @property
    def is_cash_on_delivery(self) -> bool:
        return self.payment_method == CASH_ON_DELIVERY

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "userPhone": "9999999999",
            "address": {"line1": "12 MG Road", "city": "Pune", "pincode": "411001"},
            "cartItems": [{"title": "Linen Shirt", "size": "M", "quantity": 1, "price": 499}],
            "totalAmount": 499,
            "paymentMethod": "cod",
        }
    })


class OrderStatusUpdate(StoreModel):
    status: str = Field(..., description="New free-text status")
    tracking_link: Optional[str] = Field(None, description="Replaces the tracking link when non-empty")
