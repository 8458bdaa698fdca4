"""Single-car floor command simulation for FloorCall."""

from .config import ElevatorConfig, build_elevator
from .elevator import Elevator
from .report import ConsoleReporter
from .scenario import DEFAULT_COMMANDS, Scenario, default_scenario, load_scenario, parse_commands

__all__ = [
    "ConsoleReporter",
    "DEFAULT_COMMANDS",
    "Elevator",
    "ElevatorConfig",
    "Scenario",
    "build_elevator",
    "default_scenario",
    "load_scenario",
    "parse_commands",
]
