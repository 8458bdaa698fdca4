from __future__ import annotations

from typing import Optional

from .interface import FloorCommand


class SchedulerError(Exception):
    """Base class for errors raised while running floor commands."""


class InvalidInputError(SchedulerError, ValueError):
    """The command worklist itself is unusable (e.g. ``None``)."""


class InvalidOperationError(SchedulerError, RuntimeError):
    """A head command cannot be serviced from the car's current floor."""

    def __init__(
        self,
        message: str,
        command: Optional[FloorCommand] = None,
        current_floor: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.command = command
        self.current_floor = current_floor


class FloorOutOfRangeError(InvalidOperationError):
    """A command names a floor outside ``[1, num_floors]`` (strict bounds only)."""
