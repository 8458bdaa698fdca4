from __future__ import annotations

from typing import Iterable, List

from .interface import ElevatorDirection, FloorCommand
from .utils import is_between


class ClassicScheduler:
    """Services same-direction calls between the current and target floors.

    Stops are always taken in ascending floor order, even on a downward leg.
    Use :class:`DirectionAwareScheduler` for stops in the order of travel.

    Calls between the two floors count in either order, so a downward leg
    also picks up down calls on the way. A literal `current < floor < target`
    filter would find none on the way down.
    """

    def intervening_stops(
        self,
        current_floor: int,
        target_floor: int,
        direction: ElevatorDirection,
        pending: Iterable[FloorCommand],
    ) -> List[FloorCommand]:
        button = direction.button()
        matches = [
            command
            for command in pending
            if is_between(command.floor, current_floor, target_floor) and command.direction is button
        ]
        return sorted(matches, key=lambda command: command.floor)
