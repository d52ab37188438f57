"""Tests for core types."""

import pytest

from bmichecker.core.types import Measurements, UnitOfMeasure


class TestUnitOfMeasure:
    """Tests for UnitOfMeasure."""

    def test_selectable_excludes_sentinel(self):
        """UNKNOWN is never offered to the user."""
        assert UnitOfMeasure.selectable() == (UnitOfMeasure.METRIC, UnitOfMeasure.IMPERIAL)

    def test_canonical_names(self):
        """Test canonical display names."""
        assert [u.value for u in UnitOfMeasure] == ["Metric", "Imperial", "Unknown"]


class TestMeasurements:
    """Tests for Measurements normalization."""

    def test_from_imperial(self):
        """Inches and pounds are converted to cm and kg."""
        m = Measurements.from_imperial(70, 180)
        assert m.height_cm == pytest.approx(70 * 2.54)
        assert m.weight_kg == pytest.approx(180 / 2.205)

    def test_from_imperial_values(self):
        """Test known conversions."""
        m = Measurements.from_imperial(70, 180)
        assert m.height_cm == pytest.approx(177.8)
        assert m.weight_kg == pytest.approx(81.6327, abs=1e-4)

    def test_frozen(self, metric_measurements):
        """Measurements are immutable."""
        with pytest.raises(AttributeError):
            metric_measurements.height_cm = 100
