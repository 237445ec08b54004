"""Run the arm controller against simulated motors."""

import logging
import time
from typing import Optional, Tuple

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .arm import ArmController
from ..configs import get_arm_config
from ..configs.arm import ArmConfig
from ..hardware.motors import MotorConfig
from ..hardware.simulated import SimulatedMotor

console = Console()
app = typer.Typer(help="Simulated arm utilities")
logger = logging.getLogger(__name__)


def build_simulated_arm(
    config: ArmConfig,
    rotation_start: int = 0,
    extension_start: int = 0,
) -> Tuple[ArmController, SimulatedMotor, SimulatedMotor]:
    """Create an arm controller wired to two simulated motors.

    Args:
        config: Arm configuration
        rotation_start: Initial rotation position in ticks
        extension_start: Initial extension position in ticks

    Returns:
        Tuple of (controller, rotation_motor, extension_motor)
    """
    rotation_motor = SimulatedMotor(
        "rotation", rotation_start, config.simulated_max_ticks_per_cycle
    )
    extension_motor = SimulatedMotor(
        "extension", extension_start, config.simulated_max_ticks_per_cycle
    )
    motors = MotorConfig(rotation_motor, extension_motor, config.motor_type)
    return ArmController.from_config(motors, config), rotation_motor, extension_motor


def generate_status_display(
    controller: ArmController,
    rotation_motor: SimulatedMotor,
    extension_motor: SimulatedMotor,
    cycle: int,
) -> Panel:
    """Generate a status table for both axes."""
    table = Table(title=f"Cycle {cycle}")
    table.add_column("Axis", style="cyan")
    table.add_column("Position", justify="right")
    table.add_column("Target", justify="right")
    table.add_column("Power", justify="right")
    table.add_column("Mode")
    table.add_column("Bounds", style="dim")

    table.add_row(
        "Rotation",
        f"{rotation_motor.get_position():d} ({controller.rotation_degrees():.1f} deg)",
        str(rotation_motor.get_target_position()),
        f"{rotation_motor.get_power():+.2f}",
        rotation_motor.get_mode().value,
        f"[{controller.min_rotation_ticks}, {controller.max_rotation_ticks}]",
    )
    table.add_row(
        "Extension",
        f"{extension_motor.get_position():d}",
        str(extension_motor.get_target_position()),
        f"{extension_motor.get_power():+.2f}",
        extension_motor.get_mode().value,
        f"[{controller.min_extension_ticks}, {controller.max_extension_ticks}]",
    )
    return Panel(table, title="Arm Status", border_style="blue")


def run_position_simulation(
    config: ArmConfig, degrees: float, cycles: int, realtime: bool = False
) -> Tuple[ArmController, SimulatedMotor, SimulatedMotor]:
    """Re-issue a rotation position command every cycle and step the motors.

    Args:
        config: Arm configuration
        degrees: Target arm angle
        cycles: Number of control cycles to run
        realtime: Sleep between cycles at the configured loop rate

    Returns:
        Tuple of (controller, rotation_motor, extension_motor) after the run
    """
    controller, rotation_motor, extension_motor = build_simulated_arm(config)
    for _ in range(cycles):
        controller.rotate_to_position(degrees)
        rotation_motor.update()
        extension_motor.update()
        if realtime:
            time.sleep(1.0 / config.control_loop_hz)

    logger.info(
        "Rotation settled at %d ticks after %d cycles",
        rotation_motor.get_position(),
        cycles,
    )
    return controller, rotation_motor, extension_motor


def run_velocity_simulation(
    config: ArmConfig,
    rotate: float,
    extend: float,
    cycles: int,
    realtime: bool = False,
) -> Tuple[ArmController, SimulatedMotor, SimulatedMotor]:
    """Drive both axes in velocity mode for a number of cycles.

    An axis that runs past its limits coasts one cycle beyond them and then
    has its power cut on every following cycle.
    """
    controller, rotation_motor, extension_motor = build_simulated_arm(config)
    for _ in range(cycles):
        controller.rotate(rotate)
        controller.extend(extend)
        rotation_motor.update()
        extension_motor.update()
        if realtime:
            time.sleep(1.0 / config.control_loop_hz)

    return controller, rotation_motor, extension_motor


@app.command()
def simulate(
    degrees: float = typer.Option(..., "--degrees", help="Target arm angle"),
    cycles: int = typer.Option(100, "--cycles", "-n", help="Control cycles to run"),
    config: Optional[str] = typer.Option(
        None, "--config", "-c", help="Config file path"
    ),
    realtime: bool = typer.Option(
        False, "--realtime", help="Run at the configured control loop rate"
    ),
) -> None:
    """Rotate the simulated arm to an angle with extension compensation."""
    try:
        arm_config = get_arm_config(config)
        controller, rotation_motor, extension_motor = run_position_simulation(
            arm_config, degrees, cycles, realtime
        )
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(
        generate_status_display(controller, rotation_motor, extension_motor, cycles)
    )


@app.command()
def drive(
    rotate: float = typer.Option(0.0, "--rotate", help="Rotation direction and speed"),
    extend: float = typer.Option(0.0, "--extend", help="Extension direction"),
    cycles: int = typer.Option(100, "--cycles", "-n", help="Control cycles to run"),
    config: Optional[str] = typer.Option(
        None, "--config", "-c", help="Config file path"
    ),
    realtime: bool = typer.Option(
        False, "--realtime", help="Run at the configured control loop rate"
    ),
) -> None:
    """Drive the simulated arm in velocity mode."""
    try:
        arm_config = get_arm_config(config)
        controller, rotation_motor, extension_motor = run_velocity_simulation(
            arm_config, rotate, extend, cycles, realtime
        )
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(
        generate_status_display(controller, rotation_motor, extension_motor, cycles)
    )


if __name__ == "__main__":
    app()
