"""
GS1-128 barcode decoder for inventory receiving.
"""

from gs1_decoder.barcode import (
    extract_product_code,
    generate_gs1_code,
    gtin_to_ean13,
    is_gs1,
    normalize_gtin,
    parse_gs1,
)
from gs1_decoder.models import FieldName, GeneratedCode, LabelParams, ParsedBarcode

__version__ = "0.1.0"
__all__ = [
    "is_gs1",
    "parse_gs1",
    "extract_product_code",
    "normalize_gtin",
    "gtin_to_ean13",
    "generate_gs1_code",
    "ParsedBarcode",
    "FieldName",
    "LabelParams",
    "GeneratedCode",
]
