"""
Pytest configuration and fixtures for BMI Checker tests.
"""

import io
from collections.abc import Callable

import pytest

from bmichecker.core.types import Measurements
from bmichecker.prompts.console import Console


@pytest.fixture
def output() -> io.StringIO:
    """Captured console output."""
    return io.StringIO()


@pytest.fixture
def make_console(output) -> Callable[[str], Console]:
    """Factory for a console reading the given text and writing to `output`."""

    def _make(text: str) -> Console:
        return Console.from_streams(io.StringIO(text), output)

    return _make


@pytest.fixture
def metric_measurements() -> Measurements:
    """180cm / 75kg (BMI ~23.1, Normal Weight)."""
    return Measurements(height_cm=180.0, weight_kg=75.0)


@pytest.fixture
def obese_measurements() -> Measurements:
    """150cm / 90kg (BMI 40, Obese)."""
    return Measurements(height_cm=150.0, weight_kg=90.0)
