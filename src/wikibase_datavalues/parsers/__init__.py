from wikibase_datavalues.parsers.value_parser import (
    PARSERS,
    parse_datavalue,
    parse_datavalue_json,
    parse_value_payload,
)

__all__ = [
    "PARSERS",
    "parse_datavalue",
    "parse_datavalue_json",
    "parse_value_payload",
]
