import json
import logging
from typing import Any, Callable

from wikibase_datavalues.models.errors import ShapeMismatchError, UnknownValueKindError
from wikibase_datavalues.models.json_fields import JsonField
from wikibase_datavalues.models.json_payload import as_object
from wikibase_datavalues.models.value_kinds import ValueKind
from wikibase_datavalues.models.values import (
    DataValue,
    EntityIdValue,
    GlobeCoordinateValue,
    MonolingualTextValue,
    QuantityValue,
    StringValue,
    TimeValue,
)

logger = logging.getLogger(__name__)


PARSERS: dict[str, Callable[[Any], DataValue]] = {
    ValueKind.STRING.value: StringValue.decode,
    ValueKind.ENTITY_ID.value: EntityIdValue.decode,
    ValueKind.TIME.value: TimeValue.decode,
    ValueKind.QUANTITY.value: QuantityValue.decode,
    ValueKind.GLOBE_COORDINATE.value: GlobeCoordinateValue.decode,
    ValueKind.MONOLINGUAL_TEXT.value: MonolingualTextValue.decode,
}


def parse_value_payload(kind: str, payload: Any) -> DataValue:
    """Decode a payload whose type tag is known from context."""
    if isinstance(kind, ValueKind):
        kind = kind.value
    parser = PARSERS.get(kind)
    if not parser:
        raise UnknownValueKindError(f"Unsupported value type: {kind}")
    logger.debug(f"Decoding {kind} payload")
    return parser(payload)


def parse_datavalue(datavalue_json: Any) -> DataValue:
    """Decode a ``{"type": ..., "value": ...}`` envelope."""
    datavalue = as_object(datavalue_json, "datavalue")
    kind = datavalue.get(JsonField.TYPE.value)
    if not isinstance(kind, str):
        raise ShapeMismatchError(f"datavalue needs a string '{JsonField.TYPE.value}', got: {kind!r}")
    return parse_value_payload(kind, datavalue.get(JsonField.VALUE.value))


def parse_datavalue_json(text: str) -> DataValue:
    try:
        datavalue_json = json.loads(text)
    except json.JSONDecodeError as e:
        raise ShapeMismatchError(f"datavalue is not valid JSON: {e}") from e
    return parse_datavalue(datavalue_json)
