"""
Constant-acceleration motion over a single interval.

All operands are SI: velocity in m/s, acceleration in m/s^2, time in s.
Distance is carried in km, matching how it is reported.
"""
from __future__ import annotations

from kinematics.core.units import M_PER_KM, Quantity, Unit, as_magnitude
from kinematics.core.validation import validate_inputs


def calc_new_velocity(
    initial_velocity: float | Quantity,
    acceleration: float | Quantity,
    elapsed_time: float | Quantity,
) -> float:
    """
    Velocity after accelerating for ``elapsed_time``.

    The result is not clamped; decelerating past zero gives a negative
    velocity.

    Args:
        initial_velocity: Initial velocity in m/s
        acceleration: Constant acceleration in m/s^2
        elapsed_time: Interval length in s

    Returns:
        New velocity in m/s
    """
    validate_inputs(
        initial_velocity, acceleration, elapsed_time,
        names=("initial_velocity", "acceleration", "elapsed_time"),
    )
    v0 = as_magnitude(initial_velocity, Unit.MS, "initial_velocity")
    a = as_magnitude(acceleration, Unit.MS2, "acceleration")
    t = as_magnitude(elapsed_time, Unit.S, "elapsed_time")

    return v0 + a * t


def average_velocity(
    initial_velocity: float | Quantity,
    final_velocity: float | Quantity,
) -> float:
    """Mean of initial and final velocity (m/s), exact under constant acceleration."""
    validate_inputs(
        initial_velocity, final_velocity,
        names=("initial_velocity", "final_velocity"),
    )
    v0 = as_magnitude(initial_velocity, Unit.MS, "initial_velocity")
    v1 = as_magnitude(final_velocity, Unit.MS, "final_velocity")

    return (v0 + v1) / 2.0


def calc_new_distance(
    initial_distance: float | Quantity,
    velocity: float | Quantity,
    elapsed_time: float | Quantity,
) -> float:
    """
    Distance after traveling at ``velocity`` for ``elapsed_time``.

    Pass the average velocity over the interval, not the initial or final
    one. m/s * s gives meters, so the increment is divided by 1000 to land
    in km.

    Args:
        initial_distance: Starting distance in km
        velocity: Average velocity over the interval in m/s
        elapsed_time: Interval length in s

    Returns:
        New distance in km
    """
    validate_inputs(
        initial_distance, velocity, elapsed_time,
        names=("initial_distance", "velocity", "elapsed_time"),
    )
    d0 = as_magnitude(initial_distance, Unit.KM, "initial_distance")
    v = as_magnitude(velocity, Unit.MS, "velocity")
    t = as_magnitude(elapsed_time, Unit.S, "elapsed_time")

    return d0 + v * t / M_PER_KM
