from enum import Enum


class ValueKind(str, Enum):
    """Wire type tags of the data value envelope"""
    STRING = "string"
    ENTITY_ID = "wikibase-entityid"
    TIME = "time"
    QUANTITY = "quantity"
    GLOBE_COORDINATE = "globecoordinate"
    MONOLINGUAL_TEXT = "monolingualtext"
