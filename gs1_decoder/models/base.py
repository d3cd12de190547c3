"""
Common base models and utilities.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class GS1BaseModel(BaseModel):
    """Base model for decoded and generated barcode records."""

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        frozen=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to a camelCase dict, dropping absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize model to camelCase JSON, dropping absent fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
