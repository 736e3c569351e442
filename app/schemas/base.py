"""
app/schemas/base.py

Purpose: Shared pydantic configuration

- snake_case attributes in Python, camelCase on the wire and in Mongo
- Whitespace trimmed from every string field
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StoreModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    def to_document(self) -> dict:
        """Mongo-ready dict using the camelCase field names."""
        return self.model_dump(by_alias=True, exclude_none=True)
