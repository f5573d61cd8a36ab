from typing import Any

from pydantic import ConfigDict, Field, field_validator
from typing_extensions import Literal

from wikibase_datavalues.models.json_fields import JsonField
from wikibase_datavalues.models.json_payload import as_object, get_string
from wikibase_datavalues.models.value_kinds import ValueKind
from .base import DataValue


class MonolingualTextValue(DataValue):
    kind: Literal["monolingualtext"] = Field(default="monolingualtext", frozen=True)
    text: str
    language: str = Field(min_length=1)

    model_config = ConfigDict(frozen=True)

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        if "\n" in v or "\r" in v:
            raise ValueError("MonolingualText text must not contain newline characters")
        return v

    @classmethod
    def decode(cls, payload: Any) -> "MonolingualTextValue":
        obj = as_object(payload, ValueKind.MONOLINGUAL_TEXT.value)
        return cls._build(
            text=get_string(obj, JsonField.TEXT),
            language=get_string(obj, JsonField.LANGUAGE),
        )

    def encode(self) -> dict[str, str]:
        return {
            JsonField.TEXT.value: self.text,
            JsonField.LANGUAGE.value: self.language,
        }
