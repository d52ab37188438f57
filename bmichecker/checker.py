"""
Interactive BMI check.

Orchestrates one full conversation:
1. Greet the user
2. Choose a unit of measure (one retry on unrecognized input)
3. Read height and weight, normalized to cm/kg
4. Validate ranges
5. Calculate and classify BMI
6. Print the result
"""

import logging

from bmichecker.calculation.bmi import evaluate
from bmichecker.calculation.formatting import format_one_decimal
from bmichecker.calculation.validation import validate_measurements
from bmichecker.core.exceptions import MeasurementRangeError, UnsupportedUnitError
from bmichecker.core.types import BmiResult, Measurements, UnitOfMeasure
from bmichecker.prompts.console import Console
from bmichecker.prompts.templates import (
    CALCULATING,
    GREETING,
    HEIGHT_PROMPT_IMPERIAL,
    HEIGHT_PROMPT_METRIC,
    ILLEGAL_VALUE,
    RESULT_TEMPLATES,
    UOM_FIRST_PROMPT_TEXT,
    UOM_SECOND_PROMPT_TEXT,
    WEIGHT_PROMPT_IMPERIAL,
    WEIGHT_PROMPT_METRIC,
)
from bmichecker.prompts.uom import prompt_uom

logger = logging.getLogger(__name__)


class BmiChecker:
    """
    Runs the BMI conversation over a console.

    Every error except a first unrecognized unit propagates to the caller.
    """

    def __init__(
        self,
        console: Console,
        default_unit: UnitOfMeasure = UnitOfMeasure.IMPERIAL,
    ) -> None:
        """
        Initialize checker.

        Args:
            console: Console to converse on
            default_unit: Unit chosen when the user just presses [Enter]
        """
        self.console = console
        self.default_unit = default_unit

    def run(self) -> BmiResult:
        """
        Run the full conversation.

        Returns:
            BmiResult that was printed

        Raises:
            UnsupportedUnitError: If the unit was not recognized twice
            MeasurementRangeError: If height or weight is out of range
            InputFormatError: If a number could not be read
        """
        self.console.writeln(GREETING)

        unit = self.choose_unit()
        measurements = self.read_measurements(unit)
        self.validate(measurements)

        self.console.writeln(CALCULATING)
        result = evaluate(measurements)
        self.report(measurements, result)

        logger.info(
            f"BMI calculated: {result.bmi:.2f} ({result.category.name}) "
            f"using {unit.name} input"
        )
        return result

    def choose_unit(self) -> UnitOfMeasure:
        """Prompt for the unit, retrying once. May still return UNKNOWN."""
        unit = prompt_uom(UOM_FIRST_PROMPT_TEXT, self.console, self.default_unit)
        if unit is UnitOfMeasure.UNKNOWN:
            logger.debug("First unit prompt not recognized, prompting again")
            unit = prompt_uom(UOM_SECOND_PROMPT_TEXT, self.console, self.default_unit)
        return unit

    def read_measurements(self, unit: UnitOfMeasure) -> Measurements:
        """
        Read height and weight in the chosen unit and normalize to cm/kg.

        Raises:
            UnsupportedUnitError: If unit is not METRIC or IMPERIAL
        """
        if unit is UnitOfMeasure.METRIC:
            height_cm = self.console.prompt_float(HEIGHT_PROMPT_METRIC)
            weight_kg = self.console.prompt_float(WEIGHT_PROMPT_METRIC)
            return Measurements(height_cm=height_cm, weight_kg=weight_kg)

        if unit is UnitOfMeasure.IMPERIAL:
            height_in = self.console.prompt_float(HEIGHT_PROMPT_IMPERIAL)
            weight_lb = self.console.prompt_float(WEIGHT_PROMPT_IMPERIAL)
            measurements = Measurements.from_imperial(height_in, weight_lb)
            logger.debug(
                f"Normalized {height_in}in/{weight_lb}lb to "
                f"{measurements.height_cm}cm/{measurements.weight_kg}kg"
            )
            return measurements

        raise UnsupportedUnitError(
            f"User has specified an unsupported Unit of Measure: {unit.value}",
            unit=unit,
        )

    def validate(self, measurements: Measurements) -> None:
        """
        Validate ranges, telling the user which value was illegal.

        Raises:
            MeasurementRangeError: If a value is out of range
        """
        try:
            validate_measurements(measurements)
        except MeasurementRangeError as e:
            self.console.writeln(ILLEGAL_VALUE.format(field=e.field))
            raise

    def report(self, measurements: Measurements, result: BmiResult) -> None:
        """Print the four result lines."""
        values = {
            "height": format_one_decimal(measurements.height_cm),
            "weight": format_one_decimal(measurements.weight_kg),
            "bmi": format_one_decimal(result.bmi),
            "category": result.category.label,
        }
        for template in RESULT_TEMPLATES:
            self.console.writeln(template.format(**values))
