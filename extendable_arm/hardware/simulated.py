"""In-memory motor for running the arm controller without hardware."""

import logging

from .motors import RunMode

logger = logging.getLogger(__name__)


class SimulatedMotor:
    """Motor that integrates commanded power into encoder ticks.

    Each call to :meth:`update` advances the motor by one control cycle. In
    free-run mode the position moves by ``power * max_ticks_per_cycle``. In
    run-to-position mode it moves toward the target at ``abs(power)`` of the
    full rate and stops on the target.
    """

    def __init__(self, name: str, position: int = 0, max_ticks_per_cycle: int = 40):
        self.name = name
        self.max_ticks_per_cycle = max_ticks_per_cycle
        self._position = int(position)
        self._target_position = int(position)
        self._power = 0.0
        self._mode = RunMode.FREE_RUN

    def get_position(self) -> int:
        return self._position

    def set_power(self, value: float) -> None:
        self._power = float(value)

    def get_power(self) -> float:
        return self._power

    def set_target_position(self, ticks: int) -> None:
        self._target_position = int(ticks)

    def get_target_position(self) -> int:
        return self._target_position

    def set_mode(self, mode: RunMode) -> None:
        self._mode = RunMode(mode)

    def get_mode(self) -> RunMode:
        return self._mode

    def update(self) -> int:
        """Advance one control cycle.

        Returns:
            New position in ticks
        """
        if self._mode is RunMode.RUN_TO_POSITION:
            error = self._target_position - self._position
            step = min(abs(error), round(abs(self._power) * self.max_ticks_per_cycle))
            self._position += step if error > 0 else -step
        else:
            self._position += round(self._power * self.max_ticks_per_cycle)

        logger.debug(
            "%s: position=%d power=%+.2f mode=%s",
            self.name,
            self._position,
            self._power,
            self._mode.value,
        )
        return self._position
