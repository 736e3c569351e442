"""
app/schemas/content.py

Purpose: Reference content documents

Read-only over HTTP. Documents are loaded with scripts/seed_content.py,
which validates them through these models (ContentService.add).
"""

from pydantic import Field, field_validator
from datetime import datetime
from typing import Optional

from app.schemas.base import StoreModel
from utils.validation_utils import validate_image_url


class CarouselImage(StoreModel):
    image_url: str = Field(..., min_length=1)
    alt: str = Field(..., min_length=1, max_length=100)

    @field_validator("image_url")
    @classmethod
    def check_image_url(cls, v: str) -> str:
        if not validate_image_url(v):
            raise ValueError("Invalid image URL format")
        return v


class PolicySection(StoreModel):
    """Privacy policy, return policy and shipping info sections."""
    section_title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    created_at: Optional[datetime] = None


class TermsSection(StoreModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    created_at: Optional[datetime] = None


class DiscountCode(StoreModel):
    code: str = Field(..., min_length=1)
    discount_percentage: float = Field(..., ge=0, le=100)
