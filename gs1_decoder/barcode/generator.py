"""
GS1-128 element string generation for product labels.

Builds the string a label printer encodes in a Code 128 symbol: fixed-length
identifiers first, then variable-length identifiers separated by FNC1.
"""

from datetime import date
from types import MappingProxyType

import structlog

from gs1_decoder.barcode.check_digit import validate_gtin_check_digit
from gs1_decoder.barcode.dictionary import AI_DEFINITIONS, FIELD_DEFINITIONS, FNC1
from gs1_decoder.barcode.fields import CENTURY_PIVOT
from gs1_decoder.barcode.gtin import normalize_gtin
from gs1_decoder.models import FieldName, GeneratedCode, LabelParams, LabelTemplate, ParsedBarcode

logger = structlog.get_logger(__name__)

MAX_COUNT = 99999999

# Label parameter -> decoded field, in element order
PARAM_FIELDS = MappingProxyType(
    {
        "gtin": FieldName.GTIN,
        "production_date": FieldName.PRODUCTION_DATE,
        "expiration_date": FieldName.EXPIRATION_DATE,
        "lot": FieldName.LOT,
        "serial": FieldName.SERIAL,
        "count": FieldName.COUNT,
    }
)

PARAM_LABELS = MappingProxyType(
    {
        "gtin": "GTIN",
        "production_date": "Production date",
        "expiration_date": "Expiration date",
        "lot": "Lot",
        "serial": "Serial number",
        "count": "Count",
    }
)

GS1_TEMPLATES: MappingProxyType[str, LabelTemplate] = MappingProxyType(
    {
        "PHARMA": LabelTemplate(
            key="PHARMA",
            name="Pharmaceutical",
            description="Medicines and medical devices: lot, expiration and serial",
            visible_fields=("lot", "expiration_date", "serial"),
            required=("lot", "expiration_date"),
        ),
        "ELECTRONICS": LabelTemplate(
            key="ELECTRONICS",
            name="Electronics",
            description="Serialized equipment tracked unit by unit",
            visible_fields=("serial", "production_date"),
            required=("serial",),
        ),
        "FOOD": LabelTemplate(
            key="FOOD",
            name="Food",
            description="Perishables with lot, production and expiration dates",
            visible_fields=("lot", "production_date", "expiration_date"),
            required=("lot", "expiration_date"),
        ),
        "LOGISTICS": LabelTemplate(
            key="LOGISTICS",
            name="Logistics",
            description="Cases and pallets with a count of contained items",
            visible_fields=("lot", "count"),
            required=("count",),
        ),
        "CUSTOM": LabelTemplate(
            key="CUSTOM",
            name="Custom",
            description="Any combination of supported identifiers",
            visible_fields=("lot", "serial", "expiration_date", "production_date", "count"),
        ),
    }
)


def get_template(key: str) -> LabelTemplate:
    """
    Get a label template by key.

    Raises:
        KeyError: If the template does not exist
    """
    try:
        return GS1_TEMPLATES[key.upper()]
    except KeyError:
        raise KeyError(f"Unknown label template: {key}") from None


def _encoded_params(template: LabelTemplate | None) -> list[str]:
    """Parameters to encode, in element order (fixed-length first)."""
    visible = None if template is None else {"gtin", *template.visible_fields}
    return [name for name in PARAM_FIELDS if visible is None or name in visible]


def _encode_date(value: str) -> str:
    """Encode an ISO date as GS1 YYMMDD."""
    return date.fromisoformat(value.strip()).strftime("%y%m%d")


def _validate_date(label: str, value: str) -> str | None:
    try:
        parsed = date.fromisoformat(value.strip())
    except ValueError:
        return f"{label} must be a valid date (YYYY-MM-DD)"
    if not 1900 + CENTURY_PIVOT <= parsed.year < 2000 + CENTURY_PIVOT:
        return f"{label} must be between {1900 + CENTURY_PIVOT} and {1999 + CENTURY_PIVOT}"
    return None


def _validate_text(label: str, value: str, max_length: int) -> str | None:
    if len(value) > max_length:
        return f"{label} must have at most {max_length} characters"
    if FNC1 in value:
        return f"{label} must not contain the FNC1 separator"
    return None


def validate_label_params(
    params: LabelParams,
    template: LabelTemplate | None = None,
    verify_check_digit: bool = False,
) -> list[str]:
    """
    Validate label parameters before encoding.

    Args:
        params: Values to encode
        template: Optional template whose required fields must be set
        verify_check_digit: Also reject GTINs with a wrong check digit

    Returns:
        List of error messages, empty when the parameters are valid
    """
    errors: list[str] = []

    gtin = params.gtin.strip()
    if not gtin:
        errors.append("GTIN is required")
    elif not gtin.isascii() or not gtin.isdigit():
        errors.append("GTIN must contain only digits")
    elif len(gtin) > 14:
        errors.append("GTIN must have at most 14 digits")
    elif verify_check_digit and not validate_gtin_check_digit(normalize_gtin(gtin)):
        errors.append("Invalid GTIN check digit")

    for name in ("lot", "serial"):
        if params.is_set(name):
            definition = FIELD_DEFINITIONS[PARAM_FIELDS[name]]
            error = _validate_text(PARAM_LABELS[name], getattr(params, name), definition.length)
            if error:
                errors.append(error)

    for name in ("production_date", "expiration_date"):
        if params.is_set(name):
            error = _validate_date(PARAM_LABELS[name], getattr(params, name))
            if error:
                errors.append(error)

    if params.is_set("count"):
        count = params.count.strip()
        if not count.isascii() or not count.isdigit() or not 1 <= int(count) <= MAX_COUNT:
            errors.append(f"Count must be a number between 1 and {MAX_COUNT}")

    if template is not None:
        for name in template.required:
            if not params.is_set(name):
                errors.append(f"{PARAM_LABELS[name]} is required for the {template.name} template")

    return errors


def generate_gs1_code(
    params: LabelParams,
    template: LabelTemplate | None = None,
    verify_check_digit: bool = False,
) -> GeneratedCode:
    """
    Build a GS1-128 element string from label parameters.

    With a template, only the GTIN and the template's visible fields are
    encoded. The GTIN is padded to 14 digits and dates become YYMMDD.

    Args:
        params: Values to encode
        template: Optional label template
        verify_check_digit: Reject GTINs with a wrong check digit

    Returns:
        Generated code, or a result carrying the validation errors
    """
    errors = validate_label_params(params, template, verify_check_digit)
    if errors:
        logger.debug("Label parameters rejected", errors=errors)
        return GeneratedCode(errors=errors)

    elements: list[tuple[str, str, bool]] = []
    for name in _encoded_params(template):
        if not params.is_set(name):
            continue
        definition = FIELD_DEFINITIONS[PARAM_FIELDS[name]]
        value = getattr(params, name).strip()
        if name == "gtin":
            value = normalize_gtin(value)
        elif definition.field in (FieldName.PRODUCTION_DATE, FieldName.EXPIRATION_DATE):
            value = _encode_date(value)
        elements.append((definition.code, value, definition.is_variable))

    code_parts: list[str] = []
    for index, (ai, value, variable) in enumerate(elements):
        code_parts.append(ai + value)
        if variable and index < len(elements) - 1:
            code_parts.append(FNC1)

    return GeneratedCode(
        code="".join(code_parts),
        human_readable="".join(f"({ai}){value}" for ai, value, _ in elements),
    )


def to_human_readable(parsed: ParsedBarcode) -> str:
    """
    Render the decoded fields of a barcode as parenthesized AIs.

    Returns:
        Text like ``(01)00012345678905(10)LOT42(17)251231``, or the scan as-is
        for codes that are not GS1
    """
    if not parsed.is_gs1:
        return parsed.raw

    parts = []
    for definition in AI_DEFINITIONS:
        value = parsed.get(definition.field)
        if value is None:
            continue
        ai, data = definition.split_element(value)
        parts.append(f"({ai}){data}")
    return "".join(parts)
