from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

from scheduler import SCHEDULER_REGISTRY

from .elevator import Elevator


@dataclass
class ElevatorConfig:
    """Construction parameters for a single car."""

    num_floors: int = 10
    initial_floor: int = 1
    scheduler: str = "classic"
    strict_bounds: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ElevatorConfig":
        if not isinstance(data, Mapping):
            raise ValueError(f"Elevator config must be an object, got {type(data).__name__}")
        known = {key: data[key] for key in ("num_floors", "initial_floor", "scheduler", "strict_bounds") if key in data}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ValueError(f"Unknown elevator config keys: {', '.join(unknown)}")
        config = cls(**known)
        config.num_floors = _as_int("num_floors", config.num_floors)
        config.initial_floor = _as_int("initial_floor", config.initial_floor)
        if not isinstance(config.strict_bounds, bool):
            raise ValueError(f"strict_bounds must be true or false, got {config.strict_bounds!r}")
        return config

    def validate(self) -> None:
        if self.num_floors < 1:
            raise ValueError(f"num_floors must be at least 1, got {self.num_floors}")
        if not 1 <= self.initial_floor <= self.num_floors:
            raise ValueError(
                f"initial_floor must be within 1..{self.num_floors}, got {self.initial_floor}"
            )
        if not isinstance(self.scheduler, str) or self.scheduler.lower() not in SCHEDULER_REGISTRY:
            raise ValueError(
                f"Unknown scheduler {self.scheduler!r}. Available: {', '.join(SCHEDULER_REGISTRY)}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def build_elevator(config: ElevatorConfig) -> Elevator:
    config.validate()
    return Elevator(
        num_floors=config.num_floors,
        initial_floor=config.initial_floor,
        scheduler=config.scheduler,
        strict_bounds=config.strict_bounds,
    )


def _as_int(name: str, value: Any) -> int:
    # bool is an int subclass.
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc
