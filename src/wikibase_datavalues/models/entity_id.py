import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field, field_validator

from wikibase_datavalues.config.settings import settings
from wikibase_datavalues.models.errors import MalformedIdentifierError

ENTITY_ID_PATTERN = re.compile(r"([A-Za-z]+)([1-9][0-9]*)")
MAX_SERIAL_NUMBER = 2**64 - 1

ENTITY_TYPE_PREFIXES = {
    "item": "Q",
    "property": "P",
    "lexeme": "L",
}
ENTITY_TYPES_BY_PREFIX = {prefix: entity_type for entity_type, prefix in ENTITY_TYPE_PREFIXES.items()}


class EntityId(BaseModel):
    prefix: str
    serial_number: int = Field(ge=1, le=MAX_SERIAL_NUMBER)

    model_config = ConfigDict(frozen=True)

    @field_validator("prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        if not v.isascii() or not v.isalpha():
            raise ValueError(f"Entity id prefix must be ASCII letters, got: {v}")
        return v.upper()

    @computed_field
    @property
    def prefixed_id(self) -> str:
        return f"{self.prefix}{self.serial_number}"

    @property
    def entity_type(self) -> Optional[str]:
        return ENTITY_TYPES_BY_PREFIX.get(self.prefix)

    def to_uri(self, base_uri: Optional[str] = None) -> str:
        if base_uri is None:
            return settings.entity_uri(self.prefixed_id)
        return f"{base_uri}{self.prefixed_id}"

    def __str__(self) -> str:
        return self.prefixed_id

    @classmethod
    def parse(cls, text: str) -> "EntityId":
        """Parse a compact identifier such as ``Q42`` or ``p31``.

        Raises:
            MalformedIdentifierError: text is not ``<letters><serial number>``
        """
        match = ENTITY_ID_PATTERN.fullmatch(text) if isinstance(text, str) else None
        if not match:
            raise MalformedIdentifierError(f"Not a valid entity id: {text!r}")
        try:
            return cls(prefix=match.group(1), serial_number=int(match.group(2)))
        except ValidationError as e:
            raise MalformedIdentifierError(f"Not a valid entity id: {text!r}") from e

    @classmethod
    def from_uri(cls, uri: str) -> "EntityId":
        """Parse the last path segment of a concept URI.

        Any string is accepted structurally; a bare identifier has a
        single segment and parses as-is.
        """
        return cls.parse(uri.split("/")[-1])

    @classmethod
    def from_entity_type(cls, entity_type: str, numeric_id: int) -> "EntityId":
        prefix = ENTITY_TYPE_PREFIXES.get(entity_type)
        if prefix is None:
            raise MalformedIdentifierError(f"Unknown entity type: {entity_type!r}")
        try:
            return cls(prefix=prefix, serial_number=numeric_id)
        except ValidationError as e:
            raise MalformedIdentifierError(
                f"Not a valid {entity_type} serial number: {numeric_id!r}"
            ) from e
