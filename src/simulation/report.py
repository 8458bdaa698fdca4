from __future__ import annotations

from typing import Callable, List

from scheduler import FloorCommand

from .elevator import Elevator


class ConsoleReporter:
    """Renders an elevator run as the plain-text console trace."""

    def __init__(self, write: Callable[[str], None] = print) -> None:
        self.write = write

    def attach(self, elevator: Elevator) -> "ConsoleReporter":
        elevator.add_observer(self)
        return self

    def banner(self, elevator: Elevator) -> None:
        self.write("Elevator simulator\n")
        self.write(f"NumberFloors = {elevator.num_floors}\nInitialFloor = {elevator.initial_floor}\n")

    def on_command(self, command: FloorCommand, current_floor: int) -> None:
        self.write(
            f"Floor command: \n\tfloor = {command.floor}, "
            f"\n\tbuttonDirection = {command.direction.name.title()}"
        )

    def on_complete(self, visited_floors: List[int]) -> None:
        self.write("\nFloor stops:")
        for floor in visited_floors:
            self.write(str(floor))
