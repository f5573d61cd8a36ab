from enum import Enum


class JsonField(str, Enum):
    # envelope
    TYPE = "type"
    VALUE = "value"

    # quantity
    AMOUNT = "amount"
    UNIT = "unit"
    UPPER_BOUND = "upperBound"
    LOWER_BOUND = "lowerBound"

    # wikibase-entityid
    ENTITY_TYPE = "entity-type"
    NUMERIC_ID = "numeric-id"
    ID = "id"

    # time
    TIME = "time"
    TIMEZONE = "timezone"
    BEFORE = "before"
    AFTER = "after"
    PRECISION = "precision"
    CALENDAR_MODEL = "calendarmodel"

    # globecoordinate
    LATITUDE = "latitude"
    LONGITUDE = "longitude"
    ALTITUDE = "altitude"
    GLOBE = "globe"

    # monolingualtext
    TEXT = "text"
    LANGUAGE = "language"
