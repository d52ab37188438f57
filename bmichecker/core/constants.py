"""
Constants for BMI Checker.

These values are part of the program's external contract.
Do not change them without changing the published behavior.
"""

from typing import Final

# =============================================================================
# MEASUREMENT LIMITS
# =============================================================================
# Valid ranges are half-open: (0, MAX]

MAX_HEIGHT_CENTIMETERS: Final[int] = 300
MAX_WEIGHT_KILOS: Final[int] = 1000

# =============================================================================
# UNIT CONVERSION
# =============================================================================

INCHES_TO_CENTIMETERS: Final[float] = 2.54
POUNDS_TO_KILOS: Final[float] = 1.0 / 2.205

# =============================================================================
# CATEGORY THRESHOLDS
# =============================================================================
# Lower bound is inclusive: a BMI of exactly 25 is Overweight

CATEGORY_THRESHOLDS: Final[dict[str, tuple[float, float]]] = {
    "UNDERWEIGHT": (float("-inf"), 18.5),
    "NORMAL_WEIGHT": (18.5, 25.0),
    "OVERWEIGHT": (25.0, 30.0),
    "OBESE": (30.0, float("inf")),
}
