from __future__ import annotations

import logging
from collections import deque
from collections.abc import MutableSequence
from typing import Callable, Deque, Dict, Iterable, List, Optional, Tuple

from scheduler import (
    CommandObserver,
    FloorCommand,
    FloorOutOfRangeError,
    InvalidInputError,
    InvalidOperationError,
    Scheduler,
    get_scheduler,
)
from scheduler.utils import travel_direction

logger = logging.getLogger(__name__)


class Elevator:
    """A single car that services hall calls in worklist order.

    The first command of the worklist is the head command: it fixes the next
    target floor and the direction of travel. On the way there the car also
    stops for pending calls whose button matches that direction (which ones,
    and in what order, is up to the configured scheduler). Each serviced
    command is removed from the worklist; the run ends when it is empty.

    Not thread-safe: confine each car and the worklist it is running to one
    thread of control.
    """

    def __init__(
        self,
        num_floors: int,
        initial_floor: int,
        scheduler: str = "classic",
        strict_bounds: bool = False,
    ) -> None:
        if strict_bounds:
            if num_floors < 1:
                raise ValueError(f"num_floors must be at least 1, got {num_floors}")
            if not 1 <= initial_floor <= num_floors:
                raise ValueError(f"initial_floor {initial_floor} outside floors 1..{num_floors}")
        self.num_floors = num_floors
        self.initial_floor = initial_floor
        self.current_floor = initial_floor
        self.final_floor = initial_floor
        self.strict_bounds = strict_bounds
        self.scheduler_name = scheduler
        self.scheduler: Scheduler = get_scheduler(scheduler)
        self.event_hooks: Dict[str, List[Callable[[dict], None]]] = {}
        self._visited_floors: List[int] = []

    @property
    def visited_floors(self) -> Tuple[int, ...]:
        return tuple(self._visited_floors)

    def floor_stops(self) -> List[int]:
        return list(self._visited_floors)

    def on_event(self, event: str, callback: Callable[[dict], None]) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    def add_observer(self, observer: CommandObserver) -> None:
        """Subscribe whichever of the observer's hooks it defines."""
        on_command = getattr(observer, "on_command", None)
        on_stop = getattr(observer, "on_stop", None)
        on_complete = getattr(observer, "on_complete", None)
        if on_command is not None:
            self.on_event("command", lambda p: on_command(p["command"], p["current_floor"]))
        if on_stop is not None:
            self.on_event("stop", lambda p: on_stop(p["floor"], p["command"]))
        if on_complete is not None:
            self.on_event("complete", lambda p: on_complete(p["visited_floors"]))

    def run_commands(self, worklist: Optional[Iterable[FloorCommand]]) -> None:
        """Service every command in ``worklist``.

        Serviced commands are removed from ``worklist`` when it is a mutable
        sequence, including when a command fails validation part way through.

        Raises:
            InvalidInputError: ``worklist`` is None. Nothing is recorded.
            InvalidOperationError: a head command targets the current floor or
                the top floor. Stops made before it stay recorded.
        """
        if worklist is None:
            raise InvalidInputError("Floor command list cannot be None")

        queue: Deque[FloorCommand] = deque(worklist)
        start_floor = self.current_floor
        self._visited_floors.append(self.current_floor)
        if not queue:
            logger.debug("Empty command list; car stays at floor %d", self.current_floor)
            self._emit("complete", {"visited_floors": self.floor_stops(), "final_floor": self.final_floor})
            return

        try:
            self._drain(queue)
        finally:
            if isinstance(worklist, MutableSequence):
                worklist.clear()
                worklist.extend(queue)

        logger.info(
            "Ran commands from floor %d; final floor %d", start_floor, self.final_floor
        )
        self._emit("complete", {"visited_floors": self.floor_stops(), "final_floor": self.final_floor})

    def _drain(self, queue: Deque[FloorCommand]) -> None:
        while queue:
            command = queue.popleft()
            self._emit("command", {"command": command, "current_floor": self.current_floor})
            self._validate(command)

            target = command.floor
            direction = travel_direction(self.current_floor, target)
            logger.debug(
                "Head command %s: moving %s from floor %d", command, direction.value, self.current_floor
            )

            for stop in self.scheduler.intervening_stops(self.current_floor, target, direction, queue):
                queue.remove(stop)
                self._record_stop(stop.floor, stop)

            self.current_floor = target
            self.final_floor = target
            self._record_stop(target, command)

    def _validate(self, command: FloorCommand) -> None:
        if self.strict_bounds and not 1 <= command.floor <= self.num_floors:
            logger.warning("Rejecting %s: outside floors 1..%d", command, self.num_floors)
            raise FloorOutOfRangeError(
                f"Floor {command.floor} is outside floors 1..{self.num_floors}",
                command=command,
                current_floor=self.current_floor,
            )
        if command.floor == self.current_floor:
            logger.warning("Rejecting %s: car is already at floor %d", command, self.current_floor)
            raise InvalidOperationError(
                f"Command {command} targets the current floor {self.current_floor}",
                command=command,
                current_floor=self.current_floor,
            )
        # Either button on the top floor is rejected; the bottom floor is not checked.
        if command.floor == self.num_floors:
            logger.warning("Rejecting %s: top floor commands are invalid", command)
            raise InvalidOperationError(
                f"Command {command} targets the top floor {self.num_floors}",
                command=command,
                current_floor=self.current_floor,
            )

    def _record_stop(self, floor: int, command: FloorCommand) -> None:
        self._visited_floors.append(floor)
        logger.debug("Stopped at floor %d", floor)
        self._emit("stop", {"floor": floor, "command": command})

    def _emit(self, event: str, payload: dict) -> None:
        for callback in self.event_hooks.get(event, []):
            callback(payload)

    def snapshot(self) -> dict:
        return {
            "num_floors": self.num_floors,
            "initial_floor": self.initial_floor,
            "current_floor": self.current_floor,
            "final_floor": self.final_floor,
            "visited_floors": self.floor_stops(),
            "scheduler": self.scheduler_name,
            "strict_bounds": self.strict_bounds,
        }
