from pydantic import EmailStr, Field

from app.schemas.base import StoreModel


class ContactMessage(StoreModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    message: str = Field(..., min_length=1, max_length=5000)
