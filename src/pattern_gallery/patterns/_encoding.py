"""Small encoding helpers shared by several examples."""
import string
from datetime import datetime

_BASE36_DIGITS = string.digits + string.ascii_uppercase


def to_base36(number: int) -> str:
    """Upper-case base 36 representation of a non-negative integer."""
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def timestamp_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)
