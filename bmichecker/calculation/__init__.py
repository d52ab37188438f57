"""BMI calculation, classification, validation and display formatting."""

from bmichecker.calculation.bmi import bmi_category, calculate_bmi, evaluate
from bmichecker.calculation.formatting import format_one_decimal
from bmichecker.calculation.validation import check_range, validate_measurements

__all__ = [
    "bmi_category",
    "calculate_bmi",
    "check_range",
    "evaluate",
    "format_one_decimal",
    "validate_measurements",
]
