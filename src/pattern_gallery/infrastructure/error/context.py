"""Where an exception happened, attached to its log record."""

from datetime import datetime, timezone
from typing import Any, Dict


class ExceptionContext:
    """
    Operation and layer an exception escaped from.

    Extra keyword labels, such as the example key or variant, are carried
    along and logged with the error. They never replace the operation,
    layer or timestamp entries.
    """

    __slots__ = ("operation", "layer", "labels", "occurred_at")

    def __init__(self, operation: str, layer: str = "application", **labels: Any):
        self.operation = operation
        self.layer = layer
        self.labels = labels
        self.occurred_at = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        data = dict(self.labels)
        data.update(operation=self.operation, layer=self.layer,
                    timestamp=self.occurred_at.isoformat())
        return data
