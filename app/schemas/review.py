from pydantic import Field

from app.schemas.base import StoreModel


class ReviewCreate(StoreModel):
    name: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)
    review: str = Field(..., min_length=1)
