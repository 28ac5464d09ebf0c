from decimal import ROUND_HALF_UP, Decimal
from typing import Union

DECIMAL_ZERO = Decimal("0.00")


def quantize_decimal(val: Union[Decimal, int, float, str, None], places: int = 2) -> Decimal:
    """Round ``val`` half-up to ``places`` decimal places. ``None`` becomes zero."""
    exponent = Decimal(1).scaleb(-places)
    if val is None:
        return DECIMAL_ZERO.quantize(exponent)
    if not isinstance(val, Decimal):
        val = Decimal(str(val))
    return val.quantize(exponent, rounding=ROUND_HALF_UP)
