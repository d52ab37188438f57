"""
Number formatting for BMI Checker output.

Values are shown with at most one fractional digit. A zero fraction is
dropped, so 40.0 prints as "40" and 177.8 prints as "177.8".
"""

from decimal import ROUND_HALF_EVEN, Decimal

_ONE_PLACE = Decimal("0.1")


def format_one_decimal(value: float) -> str:
    """
    Format a number with at most one fractional digit.

    Rounds half-even on the exact binary value of the float and never
    uses grouping separators or exponent notation.

    Args:
        value: Number to format

    Returns:
        Formatted string
    """
    rounded = Decimal(value).quantize(_ONE_PLACE, rounding=ROUND_HALF_EVEN)
    text = format(rounded, "f")
    if text.endswith(".0"):
        text = text[:-2]
    if text == "-0":
        text = "0"
    return text
