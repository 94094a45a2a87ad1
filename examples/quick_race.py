#!/usr/bin/env python3
"""Quick race example driven by a simple autopilot.

Picks a vehicle from the catalog, then submits one action per turn while a
clock ticks between turns, until the race ends.

Usage:
    python examples/quick_race.py [--vehicle N] [--seed N] [--config FILE]
"""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np
from rich.logging import RichHandler

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from timerace import PreconditionError, RaceAction, RaceClock, RaceConfig, RaceEngine
from timerace.output import ConsoleOutput, Exporter


def choose_action(engine: RaceEngine, pit_below: float) -> RaceAction:
    """Pit when fuel is low, otherwise build speed and hold it."""
    vehicle = engine.selected_vehicle
    if vehicle.fuel_percentage() < pit_below:
        return RaceAction.PIT_STOP
    if vehicle.current_speed < vehicle.max_speed:
        return RaceAction.SPEED_UP
    return RaceAction.MAINTAIN_SPEED


def main():
    parser = argparse.ArgumentParser(description="Run a single autopilot race")
    parser.add_argument(
        "--vehicle",
        type=int,
        default=0,
        help="Catalog index of the vehicle (default: 0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for AI racers (default: 42)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON file with race rules",
    )
    parser.add_argument(
        "--pit-below",
        type=float,
        default=25.0,
        help="Fuel percentage that triggers a pit stop (default: 25)",
    )
    parser.add_argument(
        "--ticks-per-turn",
        type=int,
        default=2,
        help="Clock ticks forwarded between turns (default: 2)",
    )
    parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Directory to export the race summary to",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )

    config = RaceConfig.from_json_file(args.config) if args.config else RaceConfig()
    engine = RaceEngine(config=config, rng=np.random.default_rng(args.seed))

    ConsoleOutput.print_vehicle_catalog(engine.available_vehicles)
    if not 0 <= args.vehicle < len(engine.available_vehicles):
        print(f"Vehicle index {args.vehicle} is out of range")
        return 1

    engine.select_vehicle(engine.available_vehicles[args.vehicle])
    engine.start_race()
    clock = RaceClock(engine)

    print()
    while engine.is_active:
        action = choose_action(engine, args.pit_below)
        try:
            engine.execute_action(action)
        except PreconditionError as e:
            print(f"Action refused: {e}")
            engine.execute_action(RaceAction.MAINTAIN_SPEED)

        ConsoleOutput.print_race_status(engine)
        for _ in range(args.ticks_per_turn):
            if not clock.tick():
                break

    ConsoleOutput.print_standings(engine)
    ConsoleOutput.print_log(engine)

    if args.output:
        exporter = Exporter(output_dir=args.output)
        print("\nExporting results...")
        print(f"  json: {exporter.export_summary_json(engine)}")
        print(f"  csv: {exporter.export_standings_csv(engine)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
