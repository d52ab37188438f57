"""
Text templates for BMI Checker.

Every line the user sees is defined here. The wording, spacing and
trailing spaces of prompts are part of the program's contract.
"""

from typing import Final

GREETING: Final[str] = (
    "Hello!  This program will calculate your BMI based upon your height/weight."
)
CALCULATING: Final[str] = "Now calculating your BMI."

# Unit of measure prompts
UOM_FIRST_PROMPT_TEXT: Final[str] = (
    "Would you like to input your measurements in Metric (cm/kg) "
    "or Imperial (in/lb)? [Imperial]: "
)
UOM_SECOND_PROMPT_TEXT: Final[str] = 'Please specify "Metric" or "Imperial" [Imperial]: '
UOM_NOT_RECOGNIZED: Final[str] = (
    "Input value {value} is not recognized. "
    "Here is a list of allowed values: {allowed}"
)

# Measurement prompts
HEIGHT_PROMPT_METRIC: Final[str] = "Please specify your height in centimeters: "
HEIGHT_PROMPT_IMPERIAL: Final[str] = "Please specify your height in inches: "
WEIGHT_PROMPT_METRIC: Final[str] = "Please specify your weight in kilos: "
WEIGHT_PROMPT_IMPERIAL: Final[str] = "Please specify your weight in pounds: "

# Validation
ILLEGAL_VALUE: Final[str] = "Illegal value entered for {field}."

# Result lines
RESULT_TEMPLATES: Final[tuple[str, ...]] = (
    "Height: {height}cm",
    "Weight: {weight}kg",
    "BMI:    {bmi}",
    "You are: {category}",
)
