"""
Range validation for normalized measurements.

Valid ranges (both exclusive of zero):
    0 < height_cm <= 300
    0 < weight_kg <= 1000
"""

import logging

from bmichecker.core.constants import MAX_HEIGHT_CENTIMETERS, MAX_WEIGHT_KILOS
from bmichecker.core.exceptions import MeasurementRangeError
from bmichecker.core.types import Measurements

logger = logging.getLogger(__name__)


def check_range(field: str, value: float, maximum: int) -> None:
    """
    Check that value lies in (0, maximum].

    NaN fails the check.

    Raises:
        MeasurementRangeError: If the value is out of range
    """
    if not 0 < value <= maximum:
        raise MeasurementRangeError(
            f"Specified input {field} value of {value!r} is outside the "
            f"allowed range of (0:{maximum}].",
            field=field,
            value=value,
            maximum=maximum,
        )


def validate_measurements(measurements: Measurements) -> Measurements:
    """
    Validate normalized measurements. Height is checked before weight.

    Returns:
        The same measurements, for chaining

    Raises:
        MeasurementRangeError: On the first out-of-range value
    """
    check_range("height", measurements.height_cm, MAX_HEIGHT_CENTIMETERS)
    check_range("weight", measurements.weight_kg, MAX_WEIGHT_KILOS)
    logger.debug(f"Measurements within range: {measurements}")
    return measurements
