"""Fuel consumption at a constant burn rate."""
from __future__ import annotations

import logging

from kinematics.core.types import FuelState
from kinematics.core.units import Quantity, Unit, as_magnitude
from kinematics.core.validation import validate_inputs


logger = logging.getLogger(__name__)


def calc_remaining_fuel(
    initial_fuel: float | Quantity,
    burn_rate: float | Quantity,
    elapsed_time: float | Quantity,
) -> float:
    """
    Fuel left after burning for ``elapsed_time``, floored at zero.

    Args:
        initial_fuel: Starting fuel in kg
        burn_rate: Consumption rate in kg/s
        elapsed_time: Interval length in s

    Returns:
        Remaining fuel in kg
    """
    validate_inputs(
        initial_fuel, burn_rate, elapsed_time,
        names=("initial_fuel", "burn_rate", "elapsed_time"),
    )
    f0 = as_magnitude(initial_fuel, Unit.KG, "initial_fuel")
    r = as_magnitude(burn_rate, Unit.KG_S, "burn_rate")
    t = as_magnitude(elapsed_time, Unit.S, "elapsed_time")

    return max(0.0, f0 - r * t)


def fuel_burnout_time(
    initial_fuel: float | Quantity,
    burn_rate: float | Quantity,
) -> float:
    """
    Time until the tank is empty.

    Returns:
        Burnout time in s, or ``inf`` when nothing is burned
    """
    validate_inputs(initial_fuel, burn_rate, names=("initial_fuel", "burn_rate"))
    f0 = as_magnitude(initial_fuel, Unit.KG, "initial_fuel")
    r = as_magnitude(burn_rate, Unit.KG_S, "burn_rate")

    if r <= 0:
        return float("inf")
    return max(0.0, f0 / r)


def compute_fuel_state(
    initial_fuel: float | Quantity,
    burn_rate: float | Quantity,
    elapsed_time: float | Quantity,
) -> FuelState:
    """
    Remaining fuel plus whether the tank ran dry inside the interval.

    Args:
        initial_fuel: Starting fuel in kg
        burn_rate: Consumption rate in kg/s
        elapsed_time: Interval length in s

    Returns:
        FuelState for the interval
    """
    remaining = calc_remaining_fuel(initial_fuel, burn_rate, elapsed_time)
    f0 = as_magnitude(initial_fuel, Unit.KG, "initial_fuel")
    r = as_magnitude(burn_rate, Unit.KG_S, "burn_rate")
    t = as_magnitude(elapsed_time, Unit.S, "elapsed_time")

    if r > 0 and r * t > f0:
        burnout_s = fuel_burnout_time(initial_fuel, burn_rate)
        logger.debug(f"Fuel exhausted at t={burnout_s:.2f} s of {t:.2f} s")
        return FuelState(
            remaining_kg=remaining,
            consumed_kg=max(0.0, f0),
            exhausted=True,
            burnout_time_s=burnout_s,
        )

    return FuelState(remaining_kg=remaining, consumed_kg=f0 - remaining)
