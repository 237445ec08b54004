"""Command line tools for saving and inspecting arm calibration."""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .calibration import load_calibration, save_calibration
from ..common.file_manager import FileManager
from ..configs import get_arm_config, get_storage_config

logger = logging.getLogger(__name__)
console = Console()
app = typer.Typer(help="Arm calibration storage")


def _file_manager(storage_config_path: Optional[str]) -> FileManager:
    storage_config = get_storage_config(storage_config_path)
    return FileManager(storage_config.season_directory)


@app.command("save")
def save(
    config: Optional[str] = typer.Option(
        None, "--config", "-c", help="Arm config file path"
    ),
    storage_config: Optional[str] = typer.Option(
        None, "--storage-config", help="Storage config file path"
    ),
) -> None:
    """Save the configured arm calibration to the season directory."""
    try:
        arm_config = get_arm_config(config)
        file_manager = _file_manager(storage_config)
        save_calibration(
            file_manager,
            arm_config.rotation_calibration(),
            arm_config.extension_calibration(),
            arm_config.calibration_file,
        )
    except Exception as e:
        console.print(f"[red]Error saving calibration: {e}[/red]")
        raise typer.Exit(1)

    console.print(
        f"[green]✓[/green] Saved calibration to "
        f"[cyan]{file_manager.season_directory / arm_config.calibration_file}[/cyan]"
    )


@app.command("show")
def show(
    config: Optional[str] = typer.Option(
        None, "--config", "-c", help="Arm config file path"
    ),
    storage_config: Optional[str] = typer.Option(
        None, "--storage-config", help="Storage config file path"
    ),
) -> None:
    """Show the arm calibration saved in the season directory."""
    try:
        arm_config = get_arm_config(config)
        loaded = load_calibration(
            _file_manager(storage_config), arm_config.calibration_file
        )
    except Exception as e:
        console.print(f"[red]Error loading calibration: {e}[/red]")
        raise typer.Exit(1)

    if loaded is None:
        console.print("[yellow]No saved calibration found[/yellow]")
        raise typer.Exit(1)

    rotation, extension = loaded
    table = Table(title="Saved Arm Calibration")
    table.add_column("Axis", style="cyan")
    table.add_column("Min ticks", justify="right")
    table.add_column("Max ticks", justify="right")
    table.add_column("Ticks/degree", justify="right")
    table.add_row(
        "Rotation",
        str(rotation.min_ticks),
        str(rotation.max_ticks),
        f"{rotation.ticks_per_degree:g}",
    )
    table.add_row("Extension", str(extension.min_ticks), str(extension.max_ticks), "-")
    console.print(table)
