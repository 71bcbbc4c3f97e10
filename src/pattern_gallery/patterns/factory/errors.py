"""Errors shared by the factory examples."""
from typing import Iterable

from pattern_gallery.domain.base.exceptions import ValidationError


class UnknownProductTypeError(ValidationError):
    """Raised when a factory is asked for a type key it does not know."""

    def __init__(self, product: str, type_key: str, known: Iterable[str]):
        known = sorted(known)
        super().__init__(f"Invalid {product} type: {type_key!r} (expected one of: {', '.join(known)})",
                         field="type", details={"product": product, "type": type_key, "known": known})
        self.type_key = type_key
