"""
GS1-128 barcode decoding utilities.
"""

from gs1_decoder.barcode.check_digit import (
    calculate_gtin_check_digit,
    validate_gtin_check_digit,
)
from gs1_decoder.barcode.detector import is_gs1
from gs1_decoder.barcode.dictionary import (
    AI_DICTIONARY,
    FNC1,
    ApplicationIdentifierDefinition,
    match_ai,
)
from gs1_decoder.barcode.generator import (
    GS1_TEMPLATES,
    generate_gs1_code,
    get_template,
    to_human_readable,
    validate_label_params,
)
from gs1_decoder.barcode.gtin import (
    extract_product_code,
    gtin_to_ean13,
    normalize_gtin,
    to_product_code,
)
from gs1_decoder.barcode.parser import parse_gs1
from gs1_decoder.barcode.symbology import strip_symbology
from gs1_decoder.barcode.tokenizer import tokenize

__all__ = [
    "is_gs1",
    "parse_gs1",
    "extract_product_code",
    "to_product_code",
    "normalize_gtin",
    "gtin_to_ean13",
    "strip_symbology",
    "tokenize",
    "match_ai",
    "AI_DICTIONARY",
    "ApplicationIdentifierDefinition",
    "FNC1",
    "calculate_gtin_check_digit",
    "validate_gtin_check_digit",
    "GS1_TEMPLATES",
    "get_template",
    "generate_gs1_code",
    "validate_label_params",
    "to_human_readable",
]
