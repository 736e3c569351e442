"""
app/schemas/product.py

Purpose: Product catalog payloads

- Full product document accepted by POST /api/shirts
- Merchandising category is an enumerated value
"""

from pydantic import Field, field_validator
from typing import List, Literal, Optional

from app.schemas.base import StoreModel

DEFAULT_BRAND = "VASTRA FUSION"


class KeyHighlight(StoreModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)


class SizeChartRow(StoreModel):
    size: str = Field(..., min_length=1)
    chest: float
    length: float


class ProductCreate(StoreModel):
    image_url: str = Field(..., min_length=1)
    brand: str = DEFAULT_BRAND
    title: str = Field(..., min_length=1)
    discounted_price: float = Field(..., ge=0)
    price: float = Field(..., ge=0)
    discount_percent: float = Field(..., ge=0, le=100)
    images: List[str] = Field(default_factory=list)
    quantity: int = Field(1, ge=0)
    top_level_category: str = Field(..., min_length=1)
    second_level_category: Optional[str] = None
    description: str = Field(..., min_length=1)
    category: Literal["Trending", "Bestseller", "None"]
    key_highlights: List[KeyHighlight] = Field(default_factory=list)
    size_chart: List[SizeChartRow] = Field(default_factory=list)

    @field_validator("second_level_category")
    @classmethod
    def lower_case_category(cls, v: Optional[str]) -> Optional[str]:
        # listing filters compare against the lower-cased query value
        return v.lower() if v else v

    @field_validator("images")
    @classmethod
    def no_blank_images(cls, v: List[str]) -> List[str]:
        if any(not image.strip() for image in v):
            raise ValueError("images must not contain empty URLs")
        return v
