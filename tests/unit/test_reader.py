"""Tests for the input reader and console."""

import io

import pytest

from bmichecker.core.exceptions import InputFormatError
from bmichecker.prompts.reader import InputReader


class TestInputReader:
    """Tests for InputReader."""

    def test_read_line_strips_terminator(self):
        """Lines come back without newline characters."""
        reader = InputReader(io.StringIO("Metric\r\nnext\n"))
        assert reader.read_line() == "Metric"
        assert reader.read_line() == "next"

    def test_read_empty_line(self):
        """An empty line is returned as an empty string."""
        reader = InputReader(io.StringIO("\n70\n"))
        assert reader.read_line() == ""

    def test_read_line_at_end_of_input(self):
        """Exhausted input raises."""
        reader = InputReader(io.StringIO(""))
        with pytest.raises(InputFormatError):
            reader.read_line()

    def test_tokens_span_lines(self):
        """Tokens are whitespace-separated across lines."""
        reader = InputReader(io.StringIO("  180   75\n\n  60.5\n"))
        assert reader.next_float() == 180.0
        assert reader.next_float() == 75.0
        assert reader.next_float() == 60.5

    def test_line_after_token_returns_remainder(self):
        """read_line() after a token returns the rest of that line."""
        reader = InputReader(io.StringIO("180 rest of line\nnext\n"))
        assert reader.next_token() == "180"
        assert reader.read_line() == "rest of line"
        assert reader.read_line() == "next"

    @pytest.mark.parametrize(
        "token, expected",
        [("180", 180.0), ("59.94", 59.94), ("+3", 3.0), ("-2.5", -2.5), (".5", 0.5), ("5.", 5.0), ("1e2", 100.0)],
    )
    def test_valid_numbers(self, token, expected):
        """Decimal numbers parse."""
        assert InputReader(io.StringIO(token + "\n")).next_float() == pytest.approx(expected)

    @pytest.mark.parametrize("token", ["abc", "1,5", "nan", "inf", "Infinity", "12kg", "0x10"])
    def test_malformed_numbers(self, token):
        """Non-decimal tokens raise InputFormatError."""
        with pytest.raises(InputFormatError) as exc_info:
            InputReader(io.StringIO(token + "\n")).next_float()
        assert exc_info.value.token == token

    def test_number_at_end_of_input(self):
        """Running out of input while expecting a number raises."""
        reader = InputReader(io.StringIO("180\n   \n"))
        reader.next_float()
        with pytest.raises(InputFormatError):
            reader.next_float()

    def test_context_manager_closes_stream(self):
        """The stream is closed on exit, even on error."""
        stream = io.StringIO("abc\n")
        with pytest.raises(InputFormatError):
            with InputReader(stream) as reader:
                reader.next_float()
        assert reader.closed
        assert stream.closed

    def test_closed_reader_raises(self):
        """Reading after close raises."""
        reader = InputReader(io.StringIO("x\n"))
        reader.close()
        reader.close()
        with pytest.raises(InputFormatError):
            reader.read_line()


class TestConsole:
    """Tests for Console."""

    def test_prompt_has_no_newline(self, make_console, output):
        """Prompts are written as-is."""
        console = make_console("42\n")
        assert console.prompt_float("Number: ") == 42.0
        assert output.getvalue() == "Number: "

    def test_writeln(self, make_console, output):
        """writeln() appends a newline."""
        make_console("").writeln("Hello")
        assert output.getvalue() == "Hello\n"

    def test_close_closes_reader(self, make_console):
        """Closing the console releases the reader."""
        with make_console("") as console:
            pass
        assert console.reader.closed
