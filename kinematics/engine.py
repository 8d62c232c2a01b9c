"""
Single-step orchestration.

Owns every conversion between display units (km/h, km) and SI. The
calculation models only ever see SI operands.
"""

from __future__ import annotations

import logging

from kinematics.core.types import Event, EventType, ScenarioConfig, StepResult
from kinematics.core.units import Quantity, Unit, as_magnitude, kmh_to_ms, ms_to_kmh
from kinematics.core.validation import validate_inputs
from kinematics.models.motion import average_velocity, calc_new_distance, calc_new_velocity
from kinematics.models.propellant import compute_fuel_state


logger = logging.getLogger(__name__)


def compute_step(
    initial_velocity_kmh: float | Quantity,
    acceleration_ms2: float | Quantity,
    elapsed_time_s: float | Quantity,
    initial_distance_km: float | Quantity,
    initial_fuel_kg: float | Quantity,
    burn_rate_kg_s: float | Quantity,
) -> StepResult:
    """
    Compute velocity, distance and fuel after one interval.

    Acceleration is held constant for the whole interval even if the fuel
    runs out partway; that case is reported as a WARNING event.

    Args:
        initial_velocity_kmh: Initial velocity in km/h
        acceleration_ms2: Constant acceleration in m/s^2
        elapsed_time_s: Interval length in s
        initial_distance_km: Starting distance in km
        initial_fuel_kg: Starting fuel in kg
        burn_rate_kg_s: Fuel consumption rate in kg/s

    Returns:
        StepResult with SI and display-unit values

    Raises:
        InvalidInputError: If any input is not a finite number
        UnitConsistencyError: If a tagged input carries the wrong unit
    """
    validate_inputs(
        initial_velocity_kmh,
        acceleration_ms2,
        elapsed_time_s,
        initial_distance_km,
        initial_fuel_kg,
        burn_rate_kg_s,
        names=(
            "initial_velocity_kmh",
            "acceleration_ms2",
            "elapsed_time_s",
            "initial_distance_km",
            "initial_fuel_kg",
            "burn_rate_kg_s",
        ),
    )

    v0_kmh = as_magnitude(initial_velocity_kmh, Unit.KMH, "initial_velocity_kmh")
    a = as_magnitude(acceleration_ms2, Unit.MS2, "acceleration_ms2")
    t = as_magnitude(elapsed_time_s, Unit.S, "elapsed_time_s")
    d0 = as_magnitude(initial_distance_km, Unit.KM, "initial_distance_km")
    f0 = as_magnitude(initial_fuel_kg, Unit.KG, "initial_fuel_kg")
    r = as_magnitude(burn_rate_kg_s, Unit.KG_S, "burn_rate_kg_s")

    initial_velocity_ms = kmh_to_ms(v0_kmh)

    new_velocity_ms = calc_new_velocity(initial_velocity_ms, a, t)
    avg_velocity_ms = average_velocity(initial_velocity_ms, new_velocity_ms)
    new_distance_km = calc_new_distance(d0, avg_velocity_ms, t)
    fuel = compute_fuel_state(f0, r, t)

    events = []
    if fuel.exhausted:
        message = (
            f"Fuel exhausted at {fuel.burnout_time_s:.2f} s of {t:.2f} s; "
            "velocity and distance assume acceleration for the full interval"
        )
        logger.warning(message)
        events.append(Event(
            elapsed_s=fuel.burnout_time_s,
            event_type=EventType.WARNING,
            category="fuel",
            message=message,
            details={
                "initial_fuel_kg": f0,
                "burn_rate_kg_s": r,
                "elapsed_time_s": t,
            },
        ))

    result = StepResult(
        new_velocity_ms=new_velocity_ms,
        new_velocity_kmh=ms_to_kmh(new_velocity_ms),
        average_velocity_ms=avg_velocity_ms,
        new_distance_km=new_distance_km,
        fuel=fuel,
        events=events,
    )

    logger.debug(
        f"Step complete: v={result.new_velocity_kmh:.2f} km/h, "
        f"d={result.new_distance_km:.2f} km, fuel={result.remaining_fuel_kg:.2f} kg"
    )
    return result


def run_scenario(config: ScenarioConfig) -> StepResult:
    """Run one step from a scenario configuration."""
    logger.info(
        f"Running step: v0={config.initial_velocity_kmh} km/h, "
        f"a={config.acceleration_ms2} m/s^2, t={config.elapsed_time_s} s"
    )
    return compute_step(
        initial_velocity_kmh=config.initial_velocity_kmh,
        acceleration_ms2=config.acceleration_ms2,
        elapsed_time_s=config.elapsed_time_s,
        initial_distance_km=config.initial_distance_km,
        initial_fuel_kg=config.initial_fuel_kg,
        burn_rate_kg_s=config.burn_rate_kg_s,
    )


def format_results(result: StepResult) -> list[str]:
    """Display lines for a step, two decimals each."""
    return [
        f"Corrected New Velocity: {result.new_velocity_kmh:.2f} km/h",
        f"Corrected New Distance: {result.new_distance_km:.2f} km",
        f"Corrected Remaining Fuel: {result.remaining_fuel_kg:.2f} kg",
    ]
