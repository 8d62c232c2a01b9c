"""Scenario file loading and logging setup."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from kinematics.core.types import ScenarioConfig


logger = logging.getLogger(__name__)

# suffix -> parser for scenario files
_PARSERS = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.load,
}


def load_config(path: str | Path) -> Any:
    """
    Parse a YAML or JSON scenario file.

    Args:
        path: Path to the scenario file

    Returns:
        Parsed document; ``None`` for an empty YAML file

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the suffix is neither YAML nor JSON, or the JSON is malformed
        yaml.YAMLError: If the YAML is malformed
    """
    path = Path(path)
    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise ValueError(f"Unsupported config format: {path.suffix}")
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        return parser(f)


def create_scenario_config(
    scenario: Optional[Mapping[str, Any] | ScenarioConfig] = None,
    **overrides: Any,
) -> ScenarioConfig:
    """
    Create a ScenarioConfig from a mapping, an existing config, or defaults.

    A mapping may hold the fields directly or nested under a ``scenario`` key.

    Args:
        scenario: Scenario fields (mapping or ScenarioConfig)
        **overrides: Individual fields that take precedence

    Returns:
        ScenarioConfig instance

    Raises:
        ValueError: If the scenario data is not a mapping
        pydantic.ValidationError: If a field fails validation
    """
    if scenario is None:
        data: dict[str, Any] = {}
    elif isinstance(scenario, ScenarioConfig):
        data = scenario.model_dump()
    elif isinstance(scenario, Mapping):
        fields = scenario.get("scenario", scenario)
        if not isinstance(fields, Mapping):
            raise ValueError(
                f"'scenario' must be a mapping of fields, got {type(fields).__name__}"
            )
        data = dict(fields)
    else:
        raise ValueError(f"Scenario must be a mapping of fields, got {type(scenario).__name__}")

    data.update(overrides)
    return ScenarioConfig(**data)


def load_scenario_config(path: str | Path) -> ScenarioConfig:
    """
    Load a ScenarioConfig from a YAML or JSON file.

    An empty file yields the default scenario.
    """
    logger.info(f"Loading scenario: {path}")
    return create_scenario_config(load_config(path))


def setup_logging(level: int = logging.INFO, log_file: Optional[Path] = None):
    """
    Route calculator logs to stderr, keeping stdout for results.

    Args:
        level: Logging level
        log_file: Optional log file path
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    # Replace handlers left over from an earlier call
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )
