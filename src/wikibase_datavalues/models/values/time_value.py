import re
from typing import Any, Union

from pydantic import ConfigDict, Field, field_validator
from typing_extensions import Literal

from wikibase_datavalues.config.settings import settings
from wikibase_datavalues.models.entity_id import ENTITY_ID_PATTERN
from wikibase_datavalues.models.json_fields import JsonField
from wikibase_datavalues.models.json_payload import as_object, get_integer, get_string
from wikibase_datavalues.models.value_kinds import ValueKind
from .base import DataValue

TIME_PATTERN = re.compile(
    r"^[+-][0-9]{1,16}-(?:1[0-2]|0[0-9])-(?:3[01]|0[0-9]|[12][0-9])"
    r"T(?:2[0-3]|[01][0-9]):[0-5][0-9]:[0-5][0-9]Z$"
)

# Proleptic Gregorian calendar
GREGORIAN_CALENDAR_ID = "Q1985727"


def expand_concept_uri(v: str) -> str:
    """Expand a bare entity id such as ``Q2`` to a concept URI."""
    if ENTITY_ID_PATTERN.fullmatch(v):
        return settings.entity_uri(v)
    if "/" not in v:
        raise ValueError(f"Must be an entity concept URI or entity id, got: {v}")
    return v


class TimeValue(DataValue):
    kind: Literal["time"] = Field(default="time", frozen=True)
    time: str
    timezone: int = 0
    before: int = Field(default=0, ge=0)
    after: int = Field(default=0, ge=0)
    precision: int = Field(ge=0, le=14)
    calendarmodel: str = Field(default_factory=lambda: settings.entity_uri(GREGORIAN_CALENDAR_ID))

    model_config = ConfigDict(frozen=True)

    @field_validator("time")
    @classmethod
    def validate_time_format(cls, v: str) -> str:
        if not (v.startswith("+") or v.startswith("-")):
            v = "+" + v

        if not TIME_PATTERN.match(v):
            raise ValueError(f"Time value must be in format '+%Y-%m-%dT%H:%M:%SZ', got: {v}")
        return v

    @field_validator("calendarmodel")
    @classmethod
    def validate_calendarmodel(cls, v: str) -> str:
        return expand_concept_uri(v)

    @classmethod
    def decode(cls, payload: Any) -> "TimeValue":
        obj = as_object(payload, ValueKind.TIME.value)
        fields: dict[str, Any] = {
            "time": get_string(obj, JsonField.TIME),
            "precision": get_integer(obj, JsonField.PRECISION),
        }
        for field in (JsonField.TIMEZONE, JsonField.BEFORE, JsonField.AFTER):
            number = get_integer(obj, field, required=False)
            if number is not None:
                fields[field.value] = number
        calendarmodel = get_string(obj, JsonField.CALENDAR_MODEL, required=False)
        if calendarmodel:
            fields["calendarmodel"] = calendarmodel
        return cls._build(**fields)

    def encode(self) -> dict[str, Union[str, int]]:
        return {
            JsonField.TIME.value: self.time,
            JsonField.TIMEZONE.value: self.timezone,
            JsonField.BEFORE.value: self.before,
            JsonField.AFTER.value: self.after,
            JsonField.PRECISION.value: self.precision,
            JsonField.CALENDAR_MODEL.value: self.calendarmodel,
        }
