"""Command sources: the built-in demo list, CLI tokens and JSON scenario files."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Union

from scheduler import ButtonDirection, FloorCommand

from .config import ElevatorConfig

DEFAULT_COMMANDS = (
    FloorCommand(9, ButtonDirection.DOWN),
    FloorCommand(6, ButtonDirection.UP),
    FloorCommand(3, ButtonDirection.UP),
    FloorCommand(7, ButtonDirection.UP),
    FloorCommand(5, ButtonDirection.DOWN),
)


@dataclass
class Scenario:
    name: str
    config: ElevatorConfig = field(default_factory=ElevatorConfig)
    commands: List[FloorCommand] = field(default_factory=list)
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], default_name: str = "scenario") -> "Scenario":
        if not isinstance(data, Mapping):
            raise ValueError(f"Scenario must be a JSON object, got {type(data).__name__}")
        raw_commands = data.get("commands", [])
        if not isinstance(raw_commands, list):
            raise ValueError(f"Scenario commands must be a list, got {type(raw_commands).__name__}")
        commands = [
            FloorCommand.parse(item) if isinstance(item, str) else FloorCommand.from_dict(item)
            for item in raw_commands
        ]
        return cls(
            name=data.get("name", default_name),
            description=data.get("description"),
            config=ElevatorConfig.from_dict(data.get("elevator", {})),
            commands=commands,
        )


def default_scenario() -> Scenario:
    return Scenario(
        name="default",
        description="Built-in demonstration sequence",
        config=ElevatorConfig(num_floors=10, initial_floor=1),
        commands=list(DEFAULT_COMMANDS),
    )


def load_scenario(path: Union[str, Path]) -> Scenario:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Scenario file not found: {path}")
    data = json.loads(path.read_text(encoding="utf-8"))
    return Scenario.from_dict(data, default_name=path.stem)


def parse_commands(tokens: Iterable[str]) -> List[FloorCommand]:
    return [FloorCommand.parse(token) for token in tokens]
