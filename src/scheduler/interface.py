from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Mapping, Protocol


class ButtonDirection(str, Enum):
    """Hall button pressed at a floor."""

    UP = "up"
    DOWN = "down"

    @classmethod
    def parse(cls, value: object) -> "ButtonDirection":
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        if text in ("u", "up", "+", "+1", "1"):
            return cls.UP
        if text in ("d", "down", "-", "-1"):
            return cls.DOWN
        raise ValueError(f"Unknown button direction {value!r}; expected 'up' or 'down'")


class ElevatorDirection(str, Enum):
    """Direction the car travels towards its target floor."""

    UP = "up"
    DOWN = "down"

    def button(self) -> ButtonDirection:
        return ButtonDirection.UP if self is ElevatorDirection.UP else ButtonDirection.DOWN


_COMMAND_TOKEN = re.compile(r"^\s*(-?\d+)\s*[:,\s]?\s*([A-Za-z+-]+)\s*$")


@dataclass(frozen=True)
class FloorCommand:
    """A hall call: the floor it was placed on and the button pressed there."""

    floor: int
    direction: ButtonDirection

    def __post_init__(self) -> None:
        if not isinstance(self.direction, ButtonDirection):
            object.__setattr__(self, "direction", ButtonDirection.parse(self.direction))

    def __str__(self) -> str:
        return f"{self.floor}:{self.direction.value}"

    @classmethod
    def parse(cls, token: str) -> "FloorCommand":
        """Parse tokens such as ``9:down``, ``9 up`` or ``9U``."""
        match = _COMMAND_TOKEN.match(token)
        if match is None:
            raise ValueError(f"Cannot parse floor command {token!r}; expected e.g. '9:down'")
        return cls(int(match.group(1)), ButtonDirection.parse(match.group(2)))

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> "FloorCommand":
        if not isinstance(data, Mapping):
            raise ValueError(f"Floor command must be an object or a token like '9:down', got {data!r}")
        try:
            floor = data["floor"]
            direction = data["direction"]
        except KeyError as exc:
            raise ValueError(f"Floor command is missing field {exc.args[0]!r}") from exc
        if isinstance(floor, bool) or not isinstance(floor, (int, str)):
            raise ValueError(f"Floor must be an integer, got {floor!r}")
        return cls(int(floor), ButtonDirection.parse(direction))

    def to_dict(self) -> dict:
        return {"floor": self.floor, "direction": self.direction.value}


class Scheduler(Protocol):
    """Strategy interface choosing which pending calls a car services en route."""

    def intervening_stops(
        self,
        current_floor: int,
        target_floor: int,
        direction: ElevatorDirection,
        pending: Iterable[FloorCommand],
    ) -> List[FloorCommand]:
        """
        Return the pending commands serviced between the current and target
        floors, in the order the car stops at them.

        Implementations must not mutate ``pending``; the caller removes the
        returned commands from its worklist.
        """
        ...


class CommandObserver(Protocol):
    """Receives the per-run trace of an elevator.

    Every hook is optional; observers define only the ones they need.
    """

    def on_command(self, command: FloorCommand, current_floor: int) -> None:
        ...

    def on_stop(self, floor: int, command: FloorCommand) -> None:
        ...

    def on_complete(self, visited_floors: List[int]) -> None:
        ...
