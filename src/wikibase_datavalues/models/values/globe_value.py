from typing import Any, Optional

from pydantic import ConfigDict, Field, field_validator
from typing_extensions import Literal

from wikibase_datavalues.config.settings import settings
from wikibase_datavalues.models.json_fields import JsonField
from wikibase_datavalues.models.json_payload import as_object, get_number, get_string
from wikibase_datavalues.models.value_kinds import ValueKind
from .base import DataValue
from .time_value import expand_concept_uri

EARTH_ID = "Q2"


class GlobeCoordinateValue(DataValue):
    kind: Literal["globecoordinate"] = Field(default="globecoordinate", frozen=True)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    altitude: Optional[float] = None
    precision: Optional[float] = 1 / 3600
    globe: str = Field(default_factory=lambda: settings.entity_uri(EARTH_ID))

    model_config = ConfigDict(frozen=True)

    @field_validator("globe")
    @classmethod
    def validate_globe(cls, v: str) -> str:
        return expand_concept_uri(v)

    @classmethod
    def decode(cls, payload: Any) -> "GlobeCoordinateValue":
        obj = as_object(payload, ValueKind.GLOBE_COORDINATE.value)
        fields: dict[str, Any] = {
            "latitude": get_number(obj, JsonField.LATITUDE),
            "longitude": get_number(obj, JsonField.LONGITUDE),
            "altitude": get_number(obj, JsonField.ALTITUDE, required=False),
        }
        # null precision is legal on the wire; an absent key keeps the default
        if JsonField.PRECISION.value in obj:
            fields["precision"] = get_number(obj, JsonField.PRECISION, required=False)
        globe = get_string(obj, JsonField.GLOBE, required=False)
        if globe:
            fields["globe"] = globe
        return cls._build(**fields)

    def encode(self) -> dict[str, Any]:
        return {
            JsonField.LATITUDE.value: self.latitude,
            JsonField.LONGITUDE.value: self.longitude,
            JsonField.ALTITUDE.value: self.altitude,
            JsonField.PRECISION.value: self.precision,
            JsonField.GLOBE.value: self.globe,
        }
