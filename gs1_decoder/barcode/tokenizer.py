"""
Application Identifier tokenizer for GS1-128 element strings.
"""

from collections.abc import Iterator

import structlog

from gs1_decoder.barcode.dictionary import (
    FNC1,
    ApplicationIdentifierDefinition,
    match_ai,
)
from gs1_decoder.models.fields import FieldName

logger = structlog.get_logger(__name__)


def iter_elements(data: str) -> Iterator[tuple[ApplicationIdentifierDefinition, str]]:
    """
    Walk a GS1 payload and yield each recognized identifier with its raw value.

    Fixed-length values take exactly the declared number of characters, even
    when those characters look like another identifier. Variable-length values
    run to the next FNC1 separator (consumed, not included) or to the end.

    A position that does not start a known identifier is skipped one
    character at a time. This can resynchronize on digits inside an unknown
    identifier's value and produce spurious fields.

    Args:
        data: Payload with any symbology prefix already removed

    Yields:
        Tuples of (definition, raw_value) in scan order
    """
    position = 0
    end = len(data)

    while position < end:
        definition = match_ai(data, position)

        if definition is None:
            logger.debug("Skipping unrecognized identifier", position=position)
            position += 1
            continue

        position += len(definition.code)

        if definition.fixed_length:
            value = data[position:position + definition.length]
            position += definition.length
        else:
            separator = data.find(FNC1, position)
            if separator == -1:
                value = data[position:]
                position = end
            else:
                value = data[position:separator]
                position = separator + 1

        yield definition, value


def tokenize(data: str) -> dict[FieldName, str]:
    """
    Tokenize a GS1 payload into raw field values.

    A repeated identifier overwrites the earlier value.

    Returns:
        Mapping of field name to raw captured value
    """
    values: dict[FieldName, str] = {}
    for definition, value in iter_elements(data):
        values[definition.field] = value
    return values
