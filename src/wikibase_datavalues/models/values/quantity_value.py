import logging
from typing import Any, Optional

from pydantic import ConfigDict, Field
from typing_extensions import Literal

from wikibase_datavalues.models.entity_id import EntityId
from wikibase_datavalues.models.json_fields import JsonField
from wikibase_datavalues.models.json_payload import as_object, get_string
from wikibase_datavalues.models.value_kinds import ValueKind
from .base import DataValue

logger = logging.getLogger(__name__)


class QuantityValue(DataValue):
    """A measured quantity with uncertainty bounds and an optional unit.

    ``amount``, ``upper_bound`` and ``lower_bound`` are kept as the
    API's sign-prefixed decimal text; no arithmetic relation between
    them is enforced. ``unit`` is ``None`` for a dimensionless quantity.
    """

    kind: Literal["quantity"] = Field(default="quantity", frozen=True)
    amount: str
    upper_bound: str
    lower_bound: str
    unit: Optional[EntityId] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_integer(cls, value: int) -> "QuantityValue":
        """Exact quantity: all three numbers equal, no unit.

        Zero is written as ``+0``; negative values keep their ``-``.
        """
        amount = str(value)
        if value >= 0:
            amount = "+" + amount
        return cls(amount=amount, upper_bound=amount, lower_bound=amount, unit=None)

    @classmethod
    def decode(cls, payload: Any) -> "QuantityValue":
        obj = as_object(payload, ValueKind.QUANTITY.value)
        amount = get_string(obj, JsonField.AMOUNT)
        unit = cls._decode_unit(get_string(obj, JsonField.UNIT, required=False))
        upper_bound = get_string(obj, JsonField.UPPER_BOUND)
        lower_bound = get_string(obj, JsonField.LOWER_BOUND)

        logger.debug(f"Decoded quantity {amount} [{lower_bound}, {upper_bound}] unit={unit}")
        return cls._build(
            amount=amount,
            upper_bound=upper_bound,
            lower_bound=lower_bound,
            unit=unit,
        )

    @staticmethod
    def _decode_unit(unit_string: Optional[str]) -> Optional[EntityId]:
        if not unit_string:
            return None
        return EntityId.from_uri(unit_string)

    def encode(self) -> dict[str, str]:
        return {
            JsonField.AMOUNT.value: self.amount,
            JsonField.UNIT.value: "" if self.unit is None else self.unit.prefixed_id,
            JsonField.UPPER_BOUND.value: self.upper_bound,
            JsonField.LOWER_BOUND.value: self.lower_bound,
        }

    @property
    def is_dimensionless(self) -> bool:
        return self.unit is None

    def with_amount(self, amount: str) -> "QuantityValue":
        return self._rebuild(amount=amount)

    def with_bounds(self, lower_bound: str, upper_bound: str) -> "QuantityValue":
        return self._rebuild(lower_bound=lower_bound, upper_bound=upper_bound)

    def with_unit(self, unit: Optional[EntityId]) -> "QuantityValue":
        return self._rebuild(unit=unit)

    def _rebuild(self, **update: Any) -> "QuantityValue":
        """Copy with updated fields, validated like a fresh instance.

        Raises:
            pydantic.ValidationError: an updated field has the wrong type
        """
        fields = {
            "amount": self.amount,
            "upper_bound": self.upper_bound,
            "lower_bound": self.lower_bound,
            "unit": self.unit,
        }
        fields.update(update)
        return type(self).model_validate(fields)
