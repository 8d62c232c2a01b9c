"""Single-step kinematics calculator for vehicle velocity, distance and fuel."""

from kinematics.engine import compute_step, format_results, run_scenario

__version__ = "0.1.0"
__all__ = ["compute_step", "format_results", "run_scenario"]
