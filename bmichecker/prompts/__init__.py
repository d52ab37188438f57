"""Console I/O: input reading, prompts and user-facing text."""

from bmichecker.prompts.console import Console
from bmichecker.prompts.reader import InputReader
from bmichecker.prompts.uom import allowed_values, parse_uom, prompt_uom

__all__ = [
    "Console",
    "InputReader",
    "allowed_values",
    "parse_uom",
    "prompt_uom",
]
