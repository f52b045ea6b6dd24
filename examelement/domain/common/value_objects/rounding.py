"""Half-up rounding for scores and averages."""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(numerator: int, denominator: int, places: int = 0) -> Decimal:
    """
    Round numerator / denominator to `places` decimals, halves away from zero.

    Python's round() uses banker's rounding (round(12.5) == 12), which is not
    what students expect from a percentage, so the division is done in Decimal.

    Raises:
        ZeroDivisionError: If denominator is zero
    """
    exponent = Decimal(1).scaleb(-places)
    return (Decimal(numerator) / Decimal(denominator)).quantize(exponent, rounding=ROUND_HALF_UP)
