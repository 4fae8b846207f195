"""Currency conversion between API numbers and ``Numeric(10, 2)`` columns."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

_CENTS = Decimal("0.01")

Amount = Union[Decimal, float, int, str]


def to_storage(amount: Amount) -> Decimal:
    """Quantize an incoming amount to the two decimals the store keeps."""

    return Decimal(str(amount)).quantize(_CENTS, rounding=ROUND_HALF_UP)


def to_number(value: Optional[Amount]) -> Optional[float]:
    if value is None:
        return None
    return float(value)


__all__ = ["to_storage", "to_number"]
