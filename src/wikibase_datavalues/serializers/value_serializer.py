import json
import logging
from typing import Any

from wikibase_datavalues.models.json_fields import JsonField
from wikibase_datavalues.models.values import DataValue

logger = logging.getLogger(__name__)


def serialize_datavalue(value: DataValue) -> dict[str, Any]:
    """Wrap the encoded payload in the ``{"value", "type"}`` envelope."""
    logger.debug(f"Encoding {value.kind} value")
    return {
        JsonField.VALUE.value: value.encode(),
        JsonField.TYPE.value: value.kind,
    }


def dumps_datavalue(value: DataValue) -> str:
    return json.dumps(serialize_datavalue(value), ensure_ascii=False, separators=(",", ":"))
