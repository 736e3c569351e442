from pydantic import Field
from typing import Any

from app.schemas.base import StoreModel


class UserLookup(StoreModel):
    phone_number: str = Field(..., min_length=1, description="User's phone number")


class AddressUpdate(StoreModel):
    phone_number: str = Field(..., min_length=1, description="User's phone number")
    address: Any = Field(..., description="Replacement address book (list or object)")
