from typing import Any

from pydantic import ConfigDict, Field
from typing_extensions import Literal

from wikibase_datavalues.models.json_payload import as_string
from wikibase_datavalues.models.value_kinds import ValueKind
from .base import DataValue


class StringValue(DataValue):
    kind: Literal["string"] = Field(default="string", frozen=True)
    value: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def decode(cls, payload: Any) -> "StringValue":
        return cls._build(value=as_string(payload, ValueKind.STRING.value))

    def encode(self) -> str:
        return self.value
