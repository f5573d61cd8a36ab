from .errors import (
    DecodeError,
    DecodeErrorType,
    MalformedIdentifierError,
    NullPayloadError,
    ShapeMismatchError,
    UnknownValueKindError,
)
from .entity_id import EntityId
from .json_fields import JsonField
from .value_kinds import ValueKind
from .values import DataValue

__all__ = [
    "DecodeError",
    "DecodeErrorType",
    "MalformedIdentifierError",
    "NullPayloadError",
    "ShapeMismatchError",
    "UnknownValueKindError",
    "EntityId",
    "JsonField",
    "ValueKind",
    "DataValue",
]
