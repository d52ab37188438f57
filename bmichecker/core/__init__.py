"""Core types, constants, configuration, and exceptions for BMI Checker."""

from bmichecker.core.config import Settings, get_settings
from bmichecker.core.constants import (
    INCHES_TO_CENTIMETERS,
    MAX_HEIGHT_CENTIMETERS,
    MAX_WEIGHT_KILOS,
    POUNDS_TO_KILOS,
)
from bmichecker.core.exceptions import (
    BmiCheckerError,
    ConfigurationError,
    InputFormatError,
    InvalidArgumentError,
    MeasurementRangeError,
    UnsupportedUnitError,
)
from bmichecker.core.types import (
    BmiCategory,
    BmiResult,
    Measurements,
    UnitOfMeasure,
)

__all__ = [
    # Types
    "BmiCategory",
    "BmiResult",
    "Measurements",
    "UnitOfMeasure",
    # Constants
    "INCHES_TO_CENTIMETERS",
    "MAX_HEIGHT_CENTIMETERS",
    "MAX_WEIGHT_KILOS",
    "POUNDS_TO_KILOS",
    # Config
    "Settings",
    "get_settings",
    # Exceptions
    "BmiCheckerError",
    "ConfigurationError",
    "InputFormatError",
    "InvalidArgumentError",
    "MeasurementRangeError",
    "UnsupportedUnitError",
]
