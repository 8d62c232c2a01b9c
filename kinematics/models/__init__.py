"""Calculation models for motion and propellant."""
from __future__ import annotations

from kinematics.models.motion import average_velocity, calc_new_distance, calc_new_velocity
from kinematics.models.propellant import (
    calc_remaining_fuel,
    compute_fuel_state,
    fuel_burnout_time,
)

__all__ = [
    "average_velocity",
    "calc_new_distance",
    "calc_new_velocity",
    "calc_remaining_fuel",
    "compute_fuel_state",
    "fuel_burnout_time",
]
