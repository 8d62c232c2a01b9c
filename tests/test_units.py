"""Tests for unit conversion and tagged quantities."""

import pytest

from kinematics.core.errors import UnitConsistencyError
from kinematics.core.units import (
    KMH_TO_MS,
    MS_TO_KMH,
    Quantity,
    Unit,
    as_magnitude,
    dimension_of,
    km_to_m,
    kmh_to_ms,
    m_to_km,
    ms_to_kmh,
)


class TestConversions:
    """Test scalar conversion helpers."""

    def test_kmh_factor(self):
        """km/h to m/s factor is exactly 5/18."""
        assert KMH_TO_MS == pytest.approx(5.0 / 18.0, abs=1e-15)
        assert MS_TO_KMH == 3.6

    def test_kmh_to_ms(self):
        """3.6 km/h is 1 m/s."""
        assert kmh_to_ms(3.6) == pytest.approx(1.0)
        assert kmh_to_ms(10000.0) == pytest.approx(2777.7777777, rel=1e-9)

    def test_ms_to_kmh(self):
        """Round trip returns the original value."""
        assert ms_to_kmh(kmh_to_ms(48880.0)) == pytest.approx(48880.0, abs=1e-9)

    def test_length(self):
        """Meters and kilometers."""
        assert m_to_km(29_440_000.0) == 29440.0
        assert km_to_m(1.5) == 1500.0


class TestQuantity:
    """Test unit-tagged values."""

    def test_convert_speed(self):
        """km/h converts to m/s."""
        q = Quantity(36.0, Unit.KMH).to(Unit.MS)

        assert q.unit == Unit.MS
        assert q.value == pytest.approx(10.0)

    def test_convert_length(self):
        """km converts to m and back."""
        q = Quantity(2.0, Unit.KM).to(Unit.M)

        assert q.value == pytest.approx(2000.0)
        assert q.to(Unit.KM).value == pytest.approx(2.0)

    def test_same_unit_is_identity(self):
        """Converting to the same unit returns the same quantity."""
        q = Quantity(5.0, Unit.KG)
        assert q.to(Unit.KG) is q

    def test_cross_dimension_raises(self):
        """Speed cannot become time."""
        with pytest.raises(UnitConsistencyError) as exc_info:
            Quantity(10.0, Unit.KMH).to(Unit.S)

        assert exc_info.value.expected == "s"
        assert exc_info.value.actual == "km/h"

    def test_immutable(self):
        """Quantities are frozen."""
        q = Quantity(1.0, Unit.M)
        with pytest.raises(AttributeError):
            q.value = 2.0

    def test_dimension_of(self):
        """Units map to their dimension."""
        assert dimension_of(Unit.KMH) == dimension_of(Unit.MS) == "speed"
        assert dimension_of(Unit.KM) == "length"


class TestAsMagnitude:
    """Test unwrapping of calculation operands."""

    def test_bare_number(self):
        """Bare numbers are assumed to be in the expected unit."""
        assert as_magnitude(3, Unit.MS2) == 3.0

    def test_matching_quantity(self):
        """A quantity in the expected unit is unwrapped."""
        assert as_magnitude(Quantity(2.5, Unit.S), Unit.S) == 2.5

    def test_mismatched_quantity(self):
        """A quantity in another unit is refused, not converted."""
        with pytest.raises(UnitConsistencyError) as exc_info:
            as_magnitude(Quantity(10000.0, Unit.KMH), Unit.MS, "initial_velocity")

        assert exc_info.value.name == "initial_velocity"
        assert isinstance(exc_info.value, TypeError)
