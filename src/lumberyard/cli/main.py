"""Typer CLI for lumber inventory processing."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from lumberyard.application import ProcessInventoryCommand
from lumberyard.application.config import (
    ConditionalStepConfig,
    ConfigError,
    ConfigErrorType,
    InventoryConfiguration,
    StepConfig,
    config_to_inventory,
    load_config,
)
from lumberyard.domain import action_registry
from lumberyard.infrastructure import InventoryJsonFormatter, InventoryReportFormatter


class OutputFormat(str, Enum):
    """Report formats supported by the process command."""

    TEXT = "text"
    JSON = "json"


app = typer.Typer(
    name="lumberyard",
    help="Process lumber inventory records through their drying and treatment steps.",
)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _load_or_exit(config_file: Path) -> InventoryConfiguration:
    """Load a config file, reporting errors on stderr and exiting with code 1."""
    try:
        return load_config(config_file)
    except ConfigError as e:
        typer.echo("Errors:", err=True)
        if e.error_type == ConfigErrorType.VALIDATION:
            for detail in e.details:
                record = f" [{detail['species']}]" if "species" in detail else ""
                typer.echo(f"  {detail['path']}{record}: {detail['message']}", err=True)
        else:
            typer.echo(f"  {e.message}", err=True)
        raise typer.Exit(code=1)


def _count_steps(step: StepConfig) -> int:
    if isinstance(step, ConditionalStepConfig):
        return 1 + _count_steps(step.action)
    return 1


@app.command()
def process(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON inventory configuration file"),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Report format"),
    ] = OutputFormat.TEXT,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Process every record in an inventory file and print the result.

    Example:
        lumberyard process yard.json --format json
    """
    _configure_logging(verbose)
    config = _load_or_exit(config_file)

    inventory = config_to_inventory(config)
    output = ProcessInventoryCommand().execute(inventory)

    if output_format == OutputFormat.JSON:
        typer.echo(InventoryJsonFormatter().format(output))
    else:
        typer.echo(InventoryReportFormatter().format(output))


@app.command()
def validate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON inventory configuration file to validate"),
    ],
) -> None:
    """Validate an inventory configuration file without processing it."""
    config = _load_or_exit(config_file)

    step_count = sum(_count_steps(step) for item in config.items for step in item.steps)
    typer.echo(
        f"Validation passed: {len(config.items)} record(s), {step_count} step(s)."
    )


@app.command()
def actions() -> None:
    """List the registered processing action types."""
    for action_id in action_registry.list():
        typer.echo(action_id)


if __name__ == "__main__":
    app()
