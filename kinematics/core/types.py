"""Core data structures for a single kinematic step."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class EventType(str, Enum):
    """Types of step events."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(frozen=True)
class Event:
    """A notable condition raised while computing a step."""

    elapsed_s: float  # Offset from the start of the interval
    event_type: EventType
    category: str
    message: str
    details: dict = field(default_factory=dict)


@dataclass(frozen=True)
class FuelState:
    """Fuel bookkeeping for one interval."""

    remaining_kg: float
    consumed_kg: float
    exhausted: bool = False
    burnout_time_s: Optional[float] = None  # Set only when fuel runs out mid-interval


@dataclass(frozen=True)
class StepResult:
    """Outcome of one kinematic step."""

    new_velocity_ms: float
    new_velocity_kmh: float
    average_velocity_ms: float
    new_distance_km: float
    fuel: FuelState
    events: list[Event] = field(default_factory=list)

    @property
    def remaining_fuel_kg(self) -> float:
        """Remaining fuel in kg."""
        return self.fuel.remaining_kg

    def has_warnings(self) -> bool:
        """Check if any warning was raised during the step."""
        return any(e.event_type == EventType.WARNING for e in self.events)

    def summary(self) -> dict[str, Any]:
        """Plain-dict view for serialization."""
        return {
            "velocity": {
                "new_ms": self.new_velocity_ms,
                "new_kmh": self.new_velocity_kmh,
                "average_ms": self.average_velocity_ms,
            },
            "distance": {
                "new_km": self.new_distance_km,
            },
            "fuel": {
                "remaining_kg": self.fuel.remaining_kg,
                "consumed_kg": self.fuel.consumed_kg,
                "exhausted": self.fuel.exhausted,
                "burnout_time_s": self.fuel.burnout_time_s,
            },
            "events": [
                {
                    "elapsed_s": e.elapsed_s,
                    "type": e.event_type.value,
                    "category": e.category,
                    "message": e.message,
                    "details": e.details,
                }
                for e in self.events
            ],
        }


class ScenarioConfig(BaseModel):
    """Inputs for one step, in display units where noted."""

    model_config = ConfigDict(strict=True, allow_inf_nan=False, extra="forbid")

    initial_velocity_kmh: float = 10000.0
    acceleration_ms2: float = 3.0
    elapsed_time_s: float = Field(default=3600.0, ge=0)
    initial_distance_km: float = 0.0
    initial_fuel_kg: float = Field(default=5000.0, ge=0)
    burn_rate_kg_s: float = Field(default=0.5, ge=0)
