"""
GS1 Application Identifier dictionary.

Only the identifiers used by inventory receiving are listed. Adding an
identifier means adding one entry to ``AI_DEFINITIONS``; the tokenizer reads
lengths and termination rules from here and needs no change.
"""

from dataclasses import dataclass
from types import MappingProxyType

from gs1_decoder.models.fields import FieldName

# ASCII 29, transmitted by scanners for FNC1 inside the data stream
FNC1 = "\x1d"

# Identifier code lengths, in probe order
AI_CODE_LENGTHS = (2, 3)


@dataclass(frozen=True)
class ApplicationIdentifierDefinition:
    """Definition of a single Application Identifier."""

    code: str
    field: FieldName
    length: int
    fixed_length: bool
    title: str

    @property
    def is_variable(self) -> bool:
        """Variable-length values are terminated by FNC1 or end of data."""
        return not self.fixed_length

    def split_element(self, value: str) -> tuple[str, str]:
        """
        Split a raw value into the full printed AI and its data.

        Three-character codes are the prefix of a four-digit AI (310n, 320n)
        whose last digit is the first value character.
        """
        if len(self.code) == 3 and value:
            return self.code + value[0], value[1:]
        return self.code, value


AI_DEFINITIONS: tuple[ApplicationIdentifierDefinition, ...] = (
    ApplicationIdentifierDefinition("00", FieldName.SSCC, 18, True, "SSCC"),
    ApplicationIdentifierDefinition("01", FieldName.GTIN, 14, True, "GTIN"),
    ApplicationIdentifierDefinition("02", FieldName.CONTENT, 14, True, "CONTENT"),
    ApplicationIdentifierDefinition("10", FieldName.LOT, 20, False, "BATCH/LOT"),
    ApplicationIdentifierDefinition("11", FieldName.PRODUCTION_DATE, 6, True, "PROD DATE"),
    ApplicationIdentifierDefinition("13", FieldName.PACKAGING_DATE, 6, True, "PACK DATE"),
    ApplicationIdentifierDefinition("15", FieldName.BEST_BEFORE_DATE, 6, True, "BEST BEFORE"),
    ApplicationIdentifierDefinition("17", FieldName.EXPIRATION_DATE, 6, True, "USE BY"),
    ApplicationIdentifierDefinition("21", FieldName.SERIAL, 20, False, "SERIAL"),
    ApplicationIdentifierDefinition("30", FieldName.VAR_COUNT, 8, False, "VAR. COUNT"),
    ApplicationIdentifierDefinition("37", FieldName.COUNT, 8, False, "COUNT"),
    # 310n / 320n: the decimal-position digit is the first value character
    ApplicationIdentifierDefinition("310", FieldName.NET_WEIGHT_KG, 7, True, "NET WEIGHT (kg)"),
    ApplicationIdentifierDefinition("320", FieldName.NET_WEIGHT_LB, 7, True, "NET WEIGHT (lb)"),
)

AI_DICTIONARY: MappingProxyType[str, ApplicationIdentifierDefinition] = MappingProxyType(
    {definition.code: definition for definition in AI_DEFINITIONS}
)

# Reverse index used when encoding labels
FIELD_DEFINITIONS: MappingProxyType[FieldName, ApplicationIdentifierDefinition] = MappingProxyType(
    {definition.field: definition for definition in AI_DEFINITIONS}
)


def lookup_ai(code: str) -> ApplicationIdentifierDefinition | None:
    """Get the definition for an exact identifier code."""
    return AI_DICTIONARY.get(code)


def match_ai(data: str, position: int = 0) -> ApplicationIdentifierDefinition | None:
    """
    Match the identifier starting at ``position``.

    The two-character code is probed first; the three-character code only
    when no two-character entry exists. Never matches a partial code.

    Args:
        data: Payload with symbology prefix already removed
        position: Index to read the identifier from

    Returns:
        Matching definition, or None if the characters are not a known AI
    """
    for size in AI_CODE_LENGTHS:
        candidate = data[position:position + size]
        if len(candidate) != size:
            return None
        definition = lookup_ai(candidate)
        if definition is not None:
            return definition
    return None
