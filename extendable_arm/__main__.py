"""Main CLI entry point for the extendable arm controller."""

import logging
import typer
from typing import Optional
from rich.console import Console
from rich.table import Table

from .common.logging import setup_logging

# Initial basic logging setup (will be reconfigured based on CLI args)
setup_logging()

from .configs import get_arm_config
from .control.simulation import simulate as simulate_command
from .control.simulation import drive as drive_command
from .hardware.calibration_tool import app as calibration_app

app = typer.Typer(
    name="extendable-arm",
    help="Rotation and extension control for a telescoping robot arm",
    rich_markup_mode="rich",
)
console = Console()


def setup_logging_callback(
    log_level: str = typer.Option(
        "INFO",
        "--log-level",
        help="Set logging level (DEBUG, INFO, WARNING, ERROR)",
        case_sensitive=False,
    ),
) -> None:
    """Configure logging based on log level."""
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        console.print(f"[red]Invalid log level: {log_level}[/red]")
        console.print("Valid levels: DEBUG, INFO, WARNING, ERROR")
        raise typer.Exit(1)

    setup_logging(level)


# Add the callback to handle global options
app.callback()(setup_logging_callback)

# Add commands
app.command("simulate", help="Rotate the simulated arm to an angle")(simulate_command)
app.command("drive", help="Drive the simulated arm in velocity mode")(drive_command)

# Add sub apps
app.add_typer(calibration_app, name="calibration", help="Arm calibration storage")


@app.command("show-config")
def show_config(
    config: Optional[str] = typer.Option(
        None, "--config", "-c", help="Path to arm configuration"
    ),
) -> None:
    """Show the effective arm configuration."""
    try:
        arm_config = get_arm_config(config)
    except Exception as e:
        console.print(f"[red]Error loading configuration: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title="Arm Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")
    for name, value in arm_config.model_dump(mode="json").items():
        table.add_row(name, str(value))
    console.print(table)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
