from __future__ import annotations

from typing import Iterable, List

from .interface import ElevatorDirection, FloorCommand
from .utils import is_between, sort_commands_in_direction


class DirectionAwareScheduler:
    """Like the classic scheduler, but stops follow the direction of travel."""

    def intervening_stops(
        self,
        current_floor: int,
        target_floor: int,
        direction: ElevatorDirection,
        pending: Iterable[FloorCommand],
    ) -> List[FloorCommand]:
        button = direction.button()
        in_path = [
            command
            for command in pending
            if is_between(command.floor, current_floor, target_floor) and command.direction is button
        ]
        return sort_commands_in_direction(in_path, direction)
