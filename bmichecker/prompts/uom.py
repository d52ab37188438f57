"""
Unit-of-measure selection.

parse_uom() is the pure matching step; prompt_uom() adds the I/O around
it: writes the prompt, reads one line and scolds on unrecognized input.
Each call prompts exactly ONCE. Retrying is the caller's decision.
"""

import logging

from bmichecker.core.exceptions import InvalidArgumentError
from bmichecker.core.types import UnitOfMeasure
from bmichecker.prompts.console import Console
from bmichecker.prompts.templates import UOM_NOT_RECOGNIZED

logger = logging.getLogger(__name__)


def allowed_values() -> str:
    """
    List the units a user may type, e.g. "{ Metric, Imperial }".

    UNKNOWN is a sentinel and is not listed.
    """
    names = ", ".join(uom.value for uom in UnitOfMeasure.selectable())
    return "{ " + names + " }"


def parse_uom(
    text: str,
    default: UnitOfMeasure = UnitOfMeasure.UNKNOWN,
) -> UnitOfMeasure | None:
    """
    Match user input against the known units.

    Matching is case-insensitive on the trimmed text and covers every
    enum member, including UNKNOWN.

    Args:
        text: Raw user input
        default: Returned when the trimmed input is empty

    Returns:
        The matching unit, the default for empty input, or None when the
        input is not recognized
    """
    value = text.strip()
    if not value:
        return default

    for uom in UnitOfMeasure:
        if value.casefold() == uom.value.casefold():
            return uom

    return None


def prompt_uom(
    prompt_text: str,
    console: Console | None,
    default: UnitOfMeasure = UnitOfMeasure.UNKNOWN,
) -> UnitOfMeasure:
    """
    Prompt the user ONCE for a unit of measure.

    Args:
        prompt_text: Text written before reading (no newline is added)
        console: Console to prompt on
        default: Returned if the user just presses [Enter]

    Returns:
        The chosen unit, or UNKNOWN if the input was not recognized

    Raises:
        InvalidArgumentError: If no console is provided
    """
    if console is None:
        raise InvalidArgumentError(
            f"Console provided to prompt_uom is None.  Prompt text: {prompt_text}"
        )

    raw = console.prompt_line(prompt_text).strip()
    uom = parse_uom(raw, default)

    if uom is None:
        logger.debug(f"Unrecognized unit of measure: {raw!r}")
        console.writeln(UOM_NOT_RECOGNIZED.format(value=raw, allowed=allowed_values()))
        return UnitOfMeasure.UNKNOWN

    logger.debug(f"Unit of measure selected: {uom.name}")
    return uom
