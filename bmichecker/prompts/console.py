"""Console pairing an input reader with an output stream."""

import sys
from typing import TextIO

from bmichecker.prompts.reader import InputReader


class Console:
    """
    Prompt/response channel for one program run.

    Output is written as-is and flushed so that prompts without a trailing
    newline are visible before input is read. Closing the console closes
    the input reader; the output stream is left open.
    """

    def __init__(self, reader: InputReader, output: TextIO) -> None:
        self.reader = reader
        self.output = output

    @classmethod
    def from_streams(
        cls,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
    ) -> "Console":
        """Create a console over the given streams (default: stdin/stdout)."""
        return cls(
            InputReader(input_stream if input_stream is not None else sys.stdin),
            output_stream if output_stream is not None else sys.stdout,
        )

    def __enter__(self) -> "Console":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self.reader.close()

    def write(self, text: str) -> None:
        """Write text without a line terminator."""
        self.output.write(text)
        self.output.flush()

    def writeln(self, text: str = "") -> None:
        """Write text followed by a newline."""
        self.write(text + "\n")

    def prompt_line(self, prompt_text: str) -> str:
        """Write a prompt and read the rest of the current input line."""
        self.write(prompt_text)
        return self.reader.read_line()

    def prompt_float(self, prompt_text: str) -> float:
        """Write a prompt and read the next decimal number."""
        self.write(prompt_text)
        return self.reader.next_float()
