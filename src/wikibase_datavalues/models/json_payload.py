"""Narrow accessors over decoded JSON (``json.loads`` output).

Variants read their payloads only through these helpers, so every
shape problem surfaces as a typed decode error instead of a
``KeyError``/``AttributeError`` deep inside a constructor.
"""

from typing import Any, Optional, Union

from wikibase_datavalues.models.errors import NullPayloadError, ShapeMismatchError
from wikibase_datavalues.models.json_fields import JsonField


def as_object(payload: Any, kind: str) -> dict[str, Any]:
    if payload is None:
        raise NullPayloadError(f"No {kind} payload to decode")
    if not isinstance(payload, dict):
        raise ShapeMismatchError(
            f"{kind} payload must be a JSON object, got {type(payload).__name__}"
        )
    return payload


def as_string(payload: Any, kind: str) -> str:
    if payload is None:
        raise NullPayloadError(f"No {kind} payload to decode")
    if not isinstance(payload, str):
        raise ShapeMismatchError(
            f"{kind} payload must be a JSON string, got {type(payload).__name__}"
        )
    return payload


def get_string(obj: dict[str, Any], field: JsonField, required: bool = True) -> Optional[str]:
    value = obj.get(field.value)
    if value is None:
        if required:
            raise ShapeMismatchError(f"Missing required field '{field.value}'")
        return None
    if not isinstance(value, str):
        raise ShapeMismatchError(
            f"Field '{field.value}' must be a string, got {type(value).__name__}"
        )
    return value


def get_number(
    obj: dict[str, Any], field: JsonField, required: bool = True
) -> Optional[Union[int, float]]:
    value = obj.get(field.value)
    if value is None:
        if required:
            raise ShapeMismatchError(f"Missing required field '{field.value}'")
        return None
    # bool is an int subclass but never a JSON number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ShapeMismatchError(
            f"Field '{field.value}' must be a number, got {type(value).__name__}"
        )
    return value


def get_integer(obj: dict[str, Any], field: JsonField, required: bool = True) -> Optional[int]:
    value = get_number(obj, field, required)
    if value is None:
        return None
    if isinstance(value, float):
        if not value.is_integer():
            raise ShapeMismatchError(f"Field '{field.value}' must be an integer, got {value}")
        value = int(value)
    return value
