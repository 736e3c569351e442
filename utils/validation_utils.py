"""
utils/validation_utils.py

Purpose: Input validation helpers

- ObjectId parsing for path parameters
- Required-string checks shared by the services
- Carousel image URL format
"""

import re
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId

IMAGE_URL_PATTERN = re.compile(r"^https?://.+\.(jpg|jpeg|png|webp|gif)$")


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """
    Parses a 24-character hex id.

    Args:
        value: Raw id (usually a path parameter)

    Returns:
        ObjectId, or None when the value is not a valid id
    """
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value).strip())
    except (InvalidId, TypeError):
        return None


def is_blank(value: Any) -> bool:
    """True for None, empty and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def validate_image_url(url: str) -> bool:
    """
    Validates a carousel image URL (http/https, common image extension).
    """
    if not url:
        return False
    return bool(IMAGE_URL_PATTERN.match(url.strip()))
