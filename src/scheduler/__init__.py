from __future__ import annotations

from typing import Dict, Type

from .classic import ClassicScheduler
from .direction_aware import DirectionAwareScheduler
from .errors import (
    FloorOutOfRangeError,
    InvalidInputError,
    InvalidOperationError,
    SchedulerError,
)
from .interface import ButtonDirection, CommandObserver, ElevatorDirection, FloorCommand, Scheduler

__all__ = [
    "ButtonDirection",
    "ClassicScheduler",
    "CommandObserver",
    "DirectionAwareScheduler",
    "ElevatorDirection",
    "FloorCommand",
    "FloorOutOfRangeError",
    "InvalidInputError",
    "InvalidOperationError",
    "SCHEDULER_REGISTRY",
    "Scheduler",
    "SchedulerError",
    "get_scheduler",
]


SCHEDULER_REGISTRY: Dict[str, Type[Scheduler]] = {
    "classic": ClassicScheduler,
    "direction_aware": DirectionAwareScheduler,
}


def get_scheduler(name: str, **kwargs) -> Scheduler:
    cls = SCHEDULER_REGISTRY.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown scheduler '{name}'. Available: {', '.join(SCHEDULER_REGISTRY)}")
    return cls(**kwargs)
