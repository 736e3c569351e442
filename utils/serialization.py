"""
utils/serialization.py

Purpose: BSON to JSON conversion

- ObjectId rendered as hex string (including nested order copies)
- datetime rendered as ISO-8601 (UTC)
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId


def to_json(value: Any) -> Any:
    """
    Recursively converts a Mongo document (or list of them) into
    JSON-compatible values.
    """
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()
    if isinstance(value, dict):
        return {key: to_json(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(item) for item in value]
    return value


def serialize_document(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if doc is None:
        return None
    return to_json(doc)


def serialize_documents(docs: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [to_json(doc) for doc in docs]
