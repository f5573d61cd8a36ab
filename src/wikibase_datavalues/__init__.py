from wikibase_datavalues.models import (
    DataValue,
    DecodeError,
    DecodeErrorType,
    EntityId,
    MalformedIdentifierError,
    NullPayloadError,
    ShapeMismatchError,
    UnknownValueKindError,
    ValueKind,
)
from wikibase_datavalues.models.values import (
    EntityIdValue,
    GlobeCoordinateValue,
    MonolingualTextValue,
    QuantityValue,
    StringValue,
    TimeValue,
)
from wikibase_datavalues.parsers import parse_datavalue, parse_datavalue_json, parse_value_payload
from wikibase_datavalues.serializers import dumps_datavalue, serialize_datavalue

__all__ = [
    "DataValue",
    "DecodeError",
    "DecodeErrorType",
    "EntityId",
    "MalformedIdentifierError",
    "NullPayloadError",
    "ShapeMismatchError",
    "UnknownValueKindError",
    "ValueKind",
    "EntityIdValue",
    "GlobeCoordinateValue",
    "MonolingualTextValue",
    "QuantityValue",
    "StringValue",
    "TimeValue",
    "parse_datavalue",
    "parse_datavalue_json",
    "parse_value_payload",
    "dumps_datavalue",
    "serialize_datavalue",
]
