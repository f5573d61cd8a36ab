import logging
from abc import abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from wikibase_datavalues.models.errors import ShapeMismatchError

logger = logging.getLogger(__name__)


class DataValue(BaseModel):
    """Base of every data value kind.

    ``kind`` is the wire type tag. Subclasses narrow it to a ``Literal``
    and implement ``encode`` (instance -> JSON payload) and ``decode``
    (JSON payload -> instance).
    """

    kind: str

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def encode(self) -> Any:
        """Encode the instance as its JSON payload (without envelope)."""

    @classmethod
    @abstractmethod
    def decode(cls, payload: Any) -> "DataValue":
        """Build an instance from its JSON payload (without envelope)."""

    @classmethod
    def _build(cls, **fields: Any) -> Any:
        try:
            return cls(**fields)
        except ValidationError as e:
            logger.debug(f"Rejected {cls.__name__} fields {fields}: {e}")
            raise ShapeMismatchError(f"Invalid {cls.__name__} payload: {e}") from e
