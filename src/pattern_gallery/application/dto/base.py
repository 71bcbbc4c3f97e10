"""Frozen pydantic base classes for the messages and results crossing the buses."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """
    Immutable data carrier.

    ``to_dict`` gives the JSON-compatible form the CLI formatters print, so
    enums come out as their string values.
    """
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class BaseCommand(BaseDTO):
    """A request to run something."""
    correlation_id: Optional[str] = None


class BaseQuery(BaseDTO):
    """A read-only request against the catalog."""
    correlation_id: Optional[str] = None


class BaseResponse(BaseDTO):
    """Outcome envelope for handlers that aggregate several results."""
    success: bool = True
    message: Optional[str] = None
