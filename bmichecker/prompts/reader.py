"""
Line and token reader over a text stream.

Works like a scanner: read_line() returns the rest of the current line,
next_token() skips whitespace (including newlines) and returns the next
whitespace-separated word, leaving the remainder of its line pending.
"""

import logging
import re
from typing import TextIO

from bmichecker.core.exceptions import InputFormatError

logger = logging.getLogger(__name__)

# Decimal real: optional sign, digits with optional fraction, optional exponent.
# Rejects nan/inf spellings that float() would otherwise accept.
DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class InputReader:
    """
    Reads lines and numeric tokens from a text stream.

    The reader owns its stream and closes it on close() or when used as
    a context manager.
    """

    def __init__(self, stream: TextIO) -> None:
        """
        Initialize reader.

        Args:
            stream: Text stream to read from (e.g. sys.stdin)
        """
        self._stream = stream
        self._pending: str | None = None
        self._closed = False

    def __enter__(self) -> "InputReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        """Whether close() has been called."""
        return self._closed

    def close(self) -> None:
        """Release the underlying stream. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._pending = None
        self._stream.close()
        logger.debug("Input reader closed")

    def _next_raw_line(self) -> str | None:
        line = self._stream.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def _ensure_open(self) -> None:
        if self._closed:
            raise InputFormatError("Input reader is closed")

    def read_line(self) -> str:
        """
        Return the rest of the current line, without its line terminator.

        Raises:
            InputFormatError: If input is exhausted
        """
        self._ensure_open()
        if self._pending is not None:
            line, self._pending = self._pending, None
            return line

        line = self._next_raw_line()
        if line is None:
            raise InputFormatError("No line found: input is exhausted")
        return line

    def next_token(self) -> str:
        """
        Return the next whitespace-separated token.

        Raises:
            InputFormatError: If input is exhausted
        """
        self._ensure_open()
        while True:
            if self._pending is None:
                self._pending = self._next_raw_line()
                if self._pending is None:
                    raise InputFormatError("No token found: input is exhausted")

            parts = self._pending.split(None, 1)
            if not parts:
                self._pending = None
                continue

            token = parts[0]
            self._pending = parts[1] if len(parts) > 1 else ""
            return token

    def next_float(self) -> float:
        """
        Read the next token as a decimal real number.

        Raises:
            InputFormatError: If the token is not a decimal number
        """
        token = self.next_token()
        if not DECIMAL_PATTERN.fullmatch(token):
            raise InputFormatError(
                f"Input value {token!r} is not a valid decimal number",
                token=token,
            )
        value = float(token)
        logger.debug(f"Parsed number {value!r} from token {token!r}")
        return value
