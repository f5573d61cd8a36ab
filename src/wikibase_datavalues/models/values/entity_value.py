from typing import Any, Union

from pydantic import ConfigDict, Field
from typing_extensions import Literal

from wikibase_datavalues.models.entity_id import EntityId
from wikibase_datavalues.models.errors import ShapeMismatchError
from wikibase_datavalues.models.json_fields import JsonField
from wikibase_datavalues.models.json_payload import as_object, get_integer, get_string
from wikibase_datavalues.models.value_kinds import ValueKind
from .base import DataValue


class EntityIdValue(DataValue):
    """Reference to another entity (``wikibase-entityid``).

    Decoding prefers ``id`` and falls back to ``entity-type`` plus
    ``numeric-id``; encoding always writes all three.
    """

    kind: Literal["wikibase-entityid"] = Field(default="wikibase-entityid", frozen=True)
    entity_id: EntityId

    model_config = ConfigDict(frozen=True)

    @classmethod
    def decode(cls, payload: Any) -> "EntityIdValue":
        obj = as_object(payload, ValueKind.ENTITY_ID.value)
        prefixed_id = get_string(obj, JsonField.ID, required=False)
        if prefixed_id is not None:
            return cls._build(entity_id=EntityId.parse(prefixed_id))

        entity_type = get_string(obj, JsonField.ENTITY_TYPE, required=False)
        numeric_id = get_integer(obj, JsonField.NUMERIC_ID, required=False)
        if entity_type is None or numeric_id is None:
            raise ShapeMismatchError(
                f"{ValueKind.ENTITY_ID.value} payload needs '{JsonField.ID.value}' "
                f"or '{JsonField.ENTITY_TYPE.value}' and '{JsonField.NUMERIC_ID.value}'"
            )
        return cls._build(entity_id=EntityId.from_entity_type(entity_type, numeric_id))

    def encode(self) -> dict[str, Union[str, int]]:
        encoded: dict[str, Union[str, int]] = {}
        if self.entity_id.entity_type is not None:
            encoded[JsonField.ENTITY_TYPE.value] = self.entity_id.entity_type
        encoded[JsonField.NUMERIC_ID.value] = self.entity_id.serial_number
        encoded[JsonField.ID.value] = self.entity_id.prefixed_id
        return encoded
