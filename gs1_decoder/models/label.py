"""
Label generation models: input parameters, templates and results.
"""

from pydantic import Field

from gs1_decoder.models.base import GS1BaseModel


class LabelParams(GS1BaseModel):
    """
    Values to encode on a GS1-128 label.

    Empty strings mean the field is not set. Dates are ISO ``YYYY-MM-DD``.
    """

    gtin: str = Field("", description="GTIN-8/12/13/14, padded to 14 digits on encode")
    lot: str = Field("", description="Batch or lot number, up to 20 characters")
    serial: str = Field("", description="Serial number, up to 20 characters")
    expiration_date: str = Field("", description="Expiration date (ISO)")
    production_date: str = Field("", description="Production date (ISO)")
    count: str = Field("", description="Count of items, 1 to 99999999")

    def is_set(self, name: str) -> bool:
        """Check whether a parameter carries a non-blank value."""
        return bool(getattr(self, name).strip())


class LabelTemplate(GS1BaseModel):
    """Preset of visible and required fields for a kind of product."""

    key: str
    name: str
    description: str
    visible_fields: tuple[str, ...] = Field(..., description="Fields shown besides the GTIN")
    required: tuple[str, ...] = Field(default=(), description="Fields that must be set")


class GeneratedCode(GS1BaseModel):
    """Result of building a GS1-128 element string."""

    code: str | None = Field(None, description="Machine string with FNC1 separators")
    human_readable: str = Field("", description="Text with parenthesized AIs")
    errors: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Check if the code was generated without validation errors."""
        return not self.errors and self.code is not None
