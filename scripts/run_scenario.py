"""CLI for running FloorCall command sequences from JSON scenarios or the command line."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from scheduler import SCHEDULER_REGISTRY, SchedulerError
from simulation import (
    ConsoleReporter,
    Elevator,
    Scenario,
    build_elevator,
    default_scenario,
    load_scenario,
    parse_commands,
)


def build_scenario(args: argparse.Namespace) -> Scenario:
    if args.config:
        scenario = load_scenario(args.config)
    elif args.commands:
        scenario = Scenario(name="command-line", commands=parse_commands(args.commands))
    else:
        scenario = default_scenario()

    overrides = {
        "num_floors": args.floors,
        "initial_floor": args.initial,
        "scheduler": args.scheduler,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(scenario.config, key, value)
    if args.strict:
        scenario.config.strict_bounds = True
    return scenario


def run_scenario(scenario: Scenario, reporter: Optional[ConsoleReporter] = None) -> Elevator:
    elevator = build_elevator(scenario.config)
    if reporter is not None:
        reporter.banner(elevator)
        reporter.attach(elevator)
    elevator.run_commands(list(scenario.commands))
    return elevator


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "commands",
        nargs="*",
        help="Floor commands such as 9:down 6:up (ignored when --config is given)",
    )
    parser.add_argument("--config", type=Path, help="Path to a JSON scenario file")
    parser.add_argument("--floors", type=int, help="Number of floors served by the car")
    parser.add_argument("--initial", type=int, help="Floor the car starts on")
    parser.add_argument("--scheduler", choices=sorted(SCHEDULER_REGISTRY), help="Intervening stop strategy")
    parser.add_argument("--strict", action="store_true", help="Reject floors outside 1..floors")
    parser.add_argument("--output", type=Path, help="Optional file path to write the result as JSON")
    parser.add_argument("--quiet", action="store_true", help="Do not print the command trace")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        scenario = build_scenario(args)
        reporter = None if args.quiet else ConsoleReporter()
        elevator = run_scenario(scenario, reporter)
    except (SchedulerError, ValueError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    results = {
        "scenario": scenario.name,
        "description": scenario.description,
        "scheduler": scenario.config.scheduler,
        "final_floor": elevator.final_floor,
        "visited_floors": elevator.floor_stops(),
    }
    save_results(args.output, results)
    if args.output:
        print(f"Saved result to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
