"""
Core type definitions for BMI Checker.

Defines enums and dataclasses for units, measurements, and results.
"""

from dataclasses import dataclass
from enum import Enum

from bmichecker.core.constants import (
    CATEGORY_THRESHOLDS,
    INCHES_TO_CENTIMETERS,
    POUNDS_TO_KILOS,
)


class UnitOfMeasure(str, Enum):
    """
    Unit systems a user may enter measurements in.

    UNKNOWN is a sentinel for unrecognized input. It is never a valid
    selection for computation and is not offered to the user.
    """

    METRIC = "Metric"
    IMPERIAL = "Imperial"
    UNKNOWN = "Unknown"

    @classmethod
    def selectable(cls) -> tuple["UnitOfMeasure", ...]:
        """Units a user may actually choose (everything but UNKNOWN)."""
        return tuple(uom for uom in cls if uom is not cls.UNKNOWN)


class BmiCategory(str, Enum):
    """
    BMI categories with their published labels.

    Category Thresholds:
        - UNDERWEIGHT (< 18.5)
        - NORMAL_WEIGHT (18.5-25)
        - OVERWEIGHT (25-30)
        - OBESE (30+)

    Note: Each threshold belongs to the higher category.
    """

    UNDERWEIGHT = "Underweight (0-18.5)"
    NORMAL_WEIGHT = "Normal Weight (18.5-25)"
    OVERWEIGHT = "Overweight (25-30)"
    OBESE = "Obese (30+)"

    @classmethod
    def from_bmi(cls, bmi: float) -> "BmiCategory":
        """
        Convert a BMI value to its category.

        Zero or negative values are not expected (inputs are validated
        upstream) and land in UNDERWEIGHT.

        Args:
            bmi: Body Mass Index

        Returns:
            Corresponding category
        """
        for name, (_, upper) in CATEGORY_THRESHOLDS.items():
            if bmi < upper:
                return cls[name]
        return cls.OBESE

    @property
    def label(self) -> str:
        """Human-readable label, e.g. "Normal Weight (18.5-25)"."""
        return self.value


@dataclass(frozen=True)
class Measurements:
    """
    Height and weight normalized to centimeters and kilograms.

    Imperial input is converted on construction via from_imperial(), so
    downstream code only ever sees metric values.
    """

    height_cm: float
    weight_kg: float

    @classmethod
    def from_imperial(cls, height_in: float, weight_lb: float) -> "Measurements":
        """Build measurements from inches and pounds."""
        return cls(
            height_cm=height_in * INCHES_TO_CENTIMETERS,
            weight_kg=weight_lb * POUNDS_TO_KILOS,
        )


@dataclass(frozen=True)
class BmiResult:
    """Result of a single BMI calculation."""

    bmi: float
    category: BmiCategory
