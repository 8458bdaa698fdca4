from __future__ import annotations

from typing import Iterable, List

from .interface import ElevatorDirection, FloorCommand


def travel_direction(current_floor: int, target_floor: int) -> ElevatorDirection:
    """Direction of travel towards ``target_floor``; equal floors count as down."""
    return ElevatorDirection.UP if target_floor > current_floor else ElevatorDirection.DOWN


def is_between(floor: int, a: int, b: int) -> bool:
    """True when ``floor`` lies strictly between ``a`` and ``b``, in either order."""
    low, high = (a, b) if a <= b else (b, a)
    return low < floor < high


def sort_commands_in_direction(
    commands: Iterable[FloorCommand], direction: ElevatorDirection
) -> List[FloorCommand]:
    """Sort commands in the order a car travelling in ``direction`` reaches them."""

    key = (lambda cmd: cmd.floor) if direction is ElevatorDirection.UP else (lambda cmd: -cmd.floor)
    return sorted(commands, key=key)
