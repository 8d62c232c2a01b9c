"""CLI entrypoint for the kinematics calculator."""
from __future__ import annotations

import json
import logging
import sys

import click
import yaml

from kinematics.core.config import create_scenario_config, load_scenario_config, setup_logging
from kinematics.core.errors import KinematicsError
from kinematics.engine import format_results, run_scenario


@click.command()
@click.option("--config", "-c", type=click.Path(exists=True), help="Scenario file (YAML or JSON)")
@click.option("--json", "as_json", is_flag=True, help="Print the full result as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(config, as_json, verbose):
    """Compute velocity, distance and fuel after one interval."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        scenario = load_scenario_config(config) if config else create_scenario_config()
        result = run_scenario(scenario)
    except (KinematicsError, ValueError, yaml.YAMLError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.summary(), indent=2))
        return

    for line in format_results(result):
        click.echo(line)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
