from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from scheduler import ButtonDirection, FloorCommand, InvalidInputError, InvalidOperationError
from simulation import Elevator, ElevatorConfig, build_elevator

logger = logging.getLogger(__name__)


class FloorCommandModel(BaseModel):
    floor: int
    direction: ButtonDirection

    def to_command(self) -> FloorCommand:
        return FloorCommand(self.floor, self.direction)


class CommandBatch(BaseModel):
    commands: Optional[List[FloorCommandModel]] = None


class ElevatorSettings(BaseModel):
    num_floors: int = 10
    initial_floor: int = 1
    scheduler: str = "classic"
    strict_bounds: bool = False


class ElevatorManager:
    """Owns one car and serialises runs against it."""

    def __init__(self, config: Optional[ElevatorConfig] = None) -> None:
        self.config = config or ElevatorConfig()
        self.elevator: Elevator = build_elevator(self.config)
        self._lock = asyncio.Lock()

    def current_state(self) -> dict:
        return self.elevator.snapshot()

    async def configure(self, config: ElevatorConfig) -> dict:
        async with self._lock:
            elevator = build_elevator(config)
            self.config = config
            self.elevator = elevator
            logger.info("Reset car: %s", config.to_dict())
            return self.current_state()

    async def run(self, commands: Optional[List[FloorCommand]]) -> dict:
        async with self._lock:
            worklist = None if commands is None else list(commands)
            self.elevator.run_commands(worklist)
            state = self.current_state()
            state["remaining"] = [command.to_dict() for command in worklist]
            return state


manager = ElevatorManager()
app = FastAPI(title="FloorCall Elevator API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/state")
async def get_state() -> dict:
    return manager.current_state()


@app.post("/elevator")
async def configure_elevator(settings: ElevatorSettings) -> dict:
    config = ElevatorConfig(
        num_floors=settings.num_floors,
        initial_floor=settings.initial_floor,
        scheduler=settings.scheduler,
        strict_bounds=settings.strict_bounds,
    )
    try:
        return await manager.configure(config)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@app.post("/commands")
async def run_commands(batch: CommandBatch) -> dict:
    commands = None if batch.commands is None else [item.to_command() for item in batch.commands]
    try:
        return await manager.run(commands)
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except InvalidOperationError as exc:
        detail = {"error": str(exc), "state": manager.current_state()}
        if exc.command is not None:
            detail["command"] = exc.command.to_dict()
        raise HTTPException(status_code=409, detail=detail)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.app:app", host="0.0.0.0", port=8000, reload=False)
