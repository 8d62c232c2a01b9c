"""
Unit conversion and unit-tagged quantities.

Calculation functions work in SI (meters, seconds, kilograms). Display units
(km/h, km) are converted at the boundary by the orchestrator only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from kinematics.core.errors import UnitConsistencyError


# Conversion factors
KMH_TO_MS = 1000.0 / 3600.0  # 5/18
MS_TO_KMH = 3600.0 / 1000.0
M_PER_KM = 1000.0


class Unit(str, Enum):
    """Units understood by the calculator."""

    KMH = "km/h"
    MS = "m/s"
    MS2 = "m/s^2"
    S = "s"
    KM = "km"
    M = "m"
    KG = "kg"
    KG_S = "kg/s"


# unit -> (dimension, factor to the dimension's SI unit)
_UNIT_TABLE: dict[Unit, tuple[str, float]] = {
    Unit.KMH: ("speed", KMH_TO_MS),
    Unit.MS: ("speed", 1.0),
    Unit.MS2: ("acceleration", 1.0),
    Unit.S: ("time", 1.0),
    Unit.KM: ("length", M_PER_KM),
    Unit.M: ("length", 1.0),
    Unit.KG: ("mass", 1.0),
    Unit.KG_S: ("mass_rate", 1.0),
}


def dimension_of(unit: Unit) -> str:
    """Physical dimension of a unit (e.g. "speed")."""
    return _UNIT_TABLE[unit][0]


@dataclass(frozen=True)
class Quantity:
    """A scalar tagged with its unit."""

    value: float
    unit: Unit

    def to(self, unit: Unit) -> "Quantity":
        """
        Convert to another unit of the same dimension.

        Args:
            unit: Target unit

        Returns:
            New Quantity in the target unit

        Raises:
            UnitConsistencyError: If the units measure different dimensions
        """
        src_dim, src_factor = _UNIT_TABLE[self.unit]
        dst_dim, dst_factor = _UNIT_TABLE[unit]
        if src_dim != dst_dim:
            raise UnitConsistencyError(expected=unit.value, actual=self.unit.value)
        if unit == self.unit:
            return self
        return Quantity(self.value * src_factor / dst_factor, unit)

    def __str__(self) -> str:
        return f"{self.value} {self.unit.value}"


def kmh_to_ms(velocity_kmh: float) -> float:
    """Convert velocity from km/h to m/s."""
    return velocity_kmh * KMH_TO_MS


def ms_to_kmh(velocity_ms: float) -> float:
    """Convert velocity from m/s to km/h."""
    return velocity_ms * MS_TO_KMH


def m_to_km(distance_m: float) -> float:
    """Convert distance from meters to kilometers."""
    return distance_m / M_PER_KM


def km_to_m(distance_km: float) -> float:
    """Convert distance from kilometers to meters."""
    return distance_km * M_PER_KM


def as_magnitude(value: float | Quantity, unit: Unit, name: str | None = None) -> float:
    """
    Strip a value down to a float in the expected unit.

    Bare numbers are taken to already be in ``unit``. Tagged quantities must
    carry exactly ``unit``; no conversion happens here.

    Raises:
        UnitConsistencyError: If a tagged quantity carries another unit
    """
    if isinstance(value, Quantity):
        if value.unit != unit:
            raise UnitConsistencyError(expected=unit.value, actual=value.unit.value, name=name)
        return float(value.value)
    return float(value)
