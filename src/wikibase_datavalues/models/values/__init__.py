from .base import DataValue
from .string_value import StringValue
from .entity_value import EntityIdValue
from .time_value import TimeValue
from .quantity_value import QuantityValue
from .globe_value import GlobeCoordinateValue
from .monolingual_value import MonolingualTextValue

__all__ = [
    "DataValue",
    "StringValue",
    "EntityIdValue",
    "TimeValue",
    "QuantityValue",
    "GlobeCoordinateValue",
    "MonolingualTextValue",
]
