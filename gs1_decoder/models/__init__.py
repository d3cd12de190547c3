"""
Pydantic models for decoded barcodes and generated labels.
"""

from gs1_decoder.models.barcode import ParsedBarcode
from gs1_decoder.models.fields import DATE_FIELDS, FieldName
from gs1_decoder.models.label import GeneratedCode, LabelParams, LabelTemplate

__all__ = [
    # Decoding
    "ParsedBarcode",
    "FieldName",
    "DATE_FIELDS",
    # Labels
    "LabelParams",
    "LabelTemplate",
    "GeneratedCode",
]
