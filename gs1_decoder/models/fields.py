"""
Semantic field names decoded from GS1 Application Identifiers.
"""

from enum import Enum


class FieldName(str, Enum):
    """Closed set of fields the decoder knows how to name."""

    SSCC = "sscc"
    GTIN = "gtin"
    CONTENT = "content"
    LOT = "lot"
    PRODUCTION_DATE = "production_date"
    PACKAGING_DATE = "packaging_date"
    BEST_BEFORE_DATE = "best_before_date"
    EXPIRATION_DATE = "expiration_date"
    SERIAL = "serial"
    VAR_COUNT = "var_count"
    COUNT = "count"
    NET_WEIGHT_KG = "net_weight_kg"
    NET_WEIGHT_LB = "net_weight_lb"


# Date fields that get a derived ISO representation
DATE_FIELDS = (
    FieldName.PRODUCTION_DATE,
    FieldName.PACKAGING_DATE,
    FieldName.BEST_BEFORE_DATE,
    FieldName.EXPIRATION_DATE,
)


def formatted_field(field: FieldName) -> str:
    """Attribute name holding the ISO-formatted value of a date field."""
    return f"{field.value}_formatted"
