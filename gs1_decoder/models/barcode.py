"""
Parsed barcode model for decoded GS1-128 scans.
"""

from pydantic import Field

from gs1_decoder.models.base import GS1BaseModel
from gs1_decoder.models.fields import FieldName, formatted_field


class ParsedBarcode(GS1BaseModel):
    """
    Result of decoding one scanned barcode string.

    Built once per scan and immutable afterwards. When ``is_gs1`` is False only
    ``gtin`` is populated, with the scanned string itself.
    """

    is_gs1: bool = Field(..., description="Whether the scan was routed as GS1")
    raw: str = Field(..., description="Original scanned string, unmodified")
    symbology: str | None = Field(None, description="Symbology named by a stripped prefix")

    # Identification
    sscc: str | None = Field(None, description="AI 00, serial shipping container code")
    gtin: str | None = Field(None, description="AI 01, trade item number")
    content: str | None = Field(None, description="AI 02, GTIN of contained items")

    # Traceability
    lot: str | None = Field(None, description="AI 10, batch or lot number")
    serial: str | None = Field(None, description="AI 21, serial number")

    # Dates (raw YYMMDD)
    production_date: str | None = Field(None, description="AI 11")
    packaging_date: str | None = Field(None, description="AI 13")
    best_before_date: str | None = Field(None, description="AI 15")
    expiration_date: str | None = Field(None, description="AI 17")

    # Dates (YYYY-MM-DD)
    production_date_formatted: str | None = None
    packaging_date_formatted: str | None = None
    best_before_date_formatted: str | None = None
    expiration_date_formatted: str | None = None

    # Quantities, kept as scanned
    var_count: str | None = Field(None, description="AI 30, variable count")
    count: str | None = Field(None, description="AI 37, count of contained items")
    net_weight_kg: str | None = Field(None, description="AI 310n, decimal digit then 6 digits")
    net_weight_lb: str | None = Field(None, description="AI 320n, decimal digit then 6 digits")

    def get(self, field: FieldName) -> str | None:
        """Get the raw value captured for a field."""
        return getattr(self, field.value)

    def get_formatted(self, field: FieldName) -> str | None:
        """Get the ISO date derived for a date field, if any."""
        return getattr(self, formatted_field(field), None)

    def fields(self) -> dict[FieldName, str]:
        """Return every populated field with its raw value."""
        return {
            field: value
            for field in FieldName
            if (value := getattr(self, field.value)) is not None
        }

    @property
    def lookup_code(self) -> str:
        """Code to use for product lookup: decoded GTIN, else the scan itself."""
        return self.gtin or self.raw
