"""Core types and utilities for the calculator."""

from kinematics.core.errors import (
    InputErrorKind,
    InvalidInputError,
    KinematicsError,
    UnitConsistencyError,
)
from kinematics.core.types import Event, EventType, FuelState, ScenarioConfig, StepResult
from kinematics.core.units import Quantity, Unit, kmh_to_ms, ms_to_kmh
from kinematics.core.validation import validate_inputs

__all__ = [
    "InputErrorKind",
    "InvalidInputError",
    "KinematicsError",
    "UnitConsistencyError",
    "Event",
    "EventType",
    "FuelState",
    "ScenarioConfig",
    "StepResult",
    "Quantity",
    "Unit",
    "kmh_to_ms",
    "ms_to_kmh",
    "validate_inputs",
]
