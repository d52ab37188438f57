"""
BMI calculation for BMI Checker.

Formula:
    BMI = weight_kg / (height_cm / 100) ** 2

Inputs are NOT validated here. Callers validate first.
"""

import logging

from bmichecker.core.types import BmiCategory, BmiResult, Measurements

logger = logging.getLogger(__name__)


def calculate_bmi(height_cm: float, weight_kg: float) -> float:
    """
    Calculate Body Mass Index.

    Args:
        height_cm: Height in centimeters
        weight_kg: Weight in kilograms

    Returns:
        BMI in kg/m^2
    """
    height_m = height_cm / 100.0
    return weight_kg / height_m**2


def bmi_category(bmi: float) -> str:
    """Return the category label for a BMI, e.g. "Obese (30+)"."""
    return BmiCategory.from_bmi(bmi).label


def evaluate(measurements: Measurements) -> BmiResult:
    """
    Calculate and classify BMI for validated measurements.

    Args:
        measurements: Normalized, range-checked measurements

    Returns:
        BmiResult with value and category
    """
    bmi = calculate_bmi(measurements.height_cm, measurements.weight_kg)
    category = BmiCategory.from_bmi(bmi)

    logger.debug(
        f"BMI {bmi:.4f} from height={measurements.height_cm}cm, "
        f"weight={measurements.weight_kg}kg -> {category.name}"
    )

    return BmiResult(bmi=bmi, category=category)
