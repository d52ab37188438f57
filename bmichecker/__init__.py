"""
BMI Checker - interactive Body Mass Index calculator.

Asks for height and weight in metric or imperial units and prints:
    - BMI rounded to one fractional digit
    - Category: Underweight / Normal Weight / Overweight / Obese

Design Philosophy:
    - Everything is normalized to centimeters/kilograms before validation
    - Invalid input is fatal, except one retry for the unit of measure
"""

from bmichecker.core.types import (
    BmiCategory,
    BmiResult,
    Measurements,
    UnitOfMeasure,
)

__version__ = "1.0.0"

__all__ = [
    "BmiCategory",
    "BmiResult",
    "Measurements",
    "UnitOfMeasure",
    "__version__",
]
