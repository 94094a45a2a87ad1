"""Race engine: action resolution, standings and end conditions."""

import logging
from collections.abc import Callable
from datetime import datetime
from enum import Enum

import numpy as np

from timerace.config import RaceConfig
from timerace.errors import InvalidStateError, PreconditionError
from timerace.models import Circuit, Participant, Vehicle, VehicleCategory
from timerace.simulation.log import RaceLog

logger = logging.getLogger(__name__)


class RaceAction(str, Enum):
    """Actions a player can take in one turn."""

    SPEED_UP = "speed_up"
    MAINTAIN_SPEED = "maintain_speed"
    PIT_STOP = "pit_stop"


class RaceStatus(str, Enum):
    """Race lifecycle."""

    IDLE = "idle"
    ACTIVE = "active"
    ENDED = "ended"


class ActionOutcome(str, Enum):
    """Result of resolving a single action."""

    OK = "ok"
    OUT_OF_FUEL = "out_of_fuel"


RESULT_WON = "Race completed! You won!"
RESULT_TIME_UP = "Time's up! Race over."
RESULT_OUT_OF_FUEL = "Out of fuel! Race over."
RESULT_FUEL_FAILURE = "Out of fuel!"

# Catalog of selectable vehicles (copied per engine)
VEHICLE_CATALOG: list[Vehicle] = [
    Vehicle(name="Lightning McQueen", category=VehicleCategory.RACING,
            max_speed=160, fuel_consumption=10.0, max_fuel=65),
    Vehicle(name="Mater", category=VehicleCategory.ECO,
            max_speed=90, fuel_consumption=5.0, max_fuel=90),
    Vehicle(name="Sally Carrera", category=VehicleCategory.SPORTS,
            max_speed=140, fuel_consumption=8.5, max_fuel=60),
    Vehicle(name="Doc Hudson", category=VehicleCategory.SPORTS,
            max_speed=130, fuel_consumption=7.5, max_fuel=70),
    Vehicle(name="Ramone", category=VehicleCategory.ECO,
            max_speed=110, fuel_consumption=6.0, max_fuel=75),
]

PLAYER_NAME = "You"
AI_RACERS = ["Speed Racer", "Lightning McQueen", "Turbo Tom"]


class RaceEngine:
    """Runs a single time-budgeted race against AI opponents.

    The engine is driven one action at a time. An external clock may also
    forward ticks through `tick`, which drain the remaining time and force
    a maintain-speed action once it runs out.
    """

    def __init__(
        self,
        max_time: float | None = None,
        config: RaceConfig | None = None,
        rng: np.random.Generator | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize the race engine.

        Args:
            max_time: Time budget in seconds (overrides config.max_time)
            config: Race rules
            rng: Random number generator for AI progress
            clock: Timestamp source for the race log
        """
        self.config = config if config is not None else RaceConfig()
        self.rng = rng if rng is not None else np.random.default_rng()

        self.max_time = max_time if max_time is not None else self.config.max_time
        self.time_remaining = self.max_time
        self.status = RaceStatus.IDLE
        self.result = ""

        self.available_vehicles = [v.model_copy(deep=True) for v in VEHICLE_CATALOG]
        self.selected_vehicle: Vehicle | None = None
        self.circuit = Circuit(
            total_laps=self.config.total_laps,
            lap_distance=self.config.lap_distance,
        )
        self.participants = [Participant(name=PLAYER_NAME, is_player=True)]
        self.participants.extend(Participant(name=name) for name in AI_RACERS)
        self.log = RaceLog(capacity=self.config.log_capacity, clock=clock)

    @property
    def is_active(self) -> bool:
        return self.status == RaceStatus.ACTIVE

    @property
    def player(self) -> Participant:
        return next(p for p in self.participants if p.is_player)

    def select_vehicle(self, vehicle: Vehicle) -> None:
        """Choose the vehicle to race with."""
        self.selected_vehicle = vehicle
        logger.debug("Selected vehicle %s", vehicle.name)

    def start_race(self) -> None:
        """Start (or restart) the race with the selected vehicle.

        Raises:
            PreconditionError: If no vehicle has been selected
        """
        if self.selected_vehicle is None:
            raise PreconditionError("No vehicle selected for race start")

        self.time_remaining = self.max_time
        self.result = ""
        self.circuit.reset()
        self.selected_vehicle.reset_race_state()
        for participant in self.participants:
            participant.reset_race_state()

        self.status = RaceStatus.ACTIVE
        self.log.log(f"Race started with {self.selected_vehicle.name}")

    def execute_action(self, action: RaceAction) -> ActionOutcome:
        """Resolve one player action.

        Args:
            action: Action to perform

        Returns:
            ActionOutcome.OUT_OF_FUEL if the action ended the race for lack
            of fuel, otherwise ActionOutcome.OK

        Raises:
            InvalidStateError: If the race is not active
            PreconditionError: If a pit stop is requested with a near-full tank
        """
        if not self.is_active:
            raise InvalidStateError("Cannot execute action - race is not active")

        action = RaceAction(action)
        handlers = {
            RaceAction.SPEED_UP: (self._speed_up, "Speed increased"),
            RaceAction.MAINTAIN_SPEED: (self._maintain_speed, "Speed maintained"),
            RaceAction.PIT_STOP: (self._pit_stop, "Pit stop completed"),
        }
        handler, message = handlers[action]

        if not handler(self.selected_vehicle):
            self.log.log("Action failed: Insufficient fuel for this action")
            self._end_race(RESULT_FUEL_FAILURE)
            return ActionOutcome.OUT_OF_FUEL

        self.log.log(message)
        self._update_race_state()
        return ActionOutcome.OK

    def tick(self, elapsed: float) -> bool:
        """React to an external clock tick.

        Args:
            elapsed: Seconds removed from the remaining time

        Returns:
            Whether the race is still active
        """
        if not self.is_active:
            return False

        self.time_remaining = max(0.0, self.time_remaining - elapsed)
        if self.time_remaining <= 0:
            logger.info("Time expired, forcing %s", RaceAction.MAINTAIN_SPEED.value)
            self.execute_action(RaceAction.MAINTAIN_SPEED)

        return self.is_active

    def _speed_up(self, vehicle: Vehicle) -> bool:
        vehicle.accelerate(self.config.speed_increment)
        if not vehicle.consume_fuel(self.config.speed_up_fuel_multiplier):
            return False
        self.time_remaining -= self.config.speed_up_time_cost
        return True

    def _maintain_speed(self, vehicle: Vehicle) -> bool:
        if not vehicle.consume_fuel(self.config.maintain_fuel_multiplier):
            return False
        self.time_remaining -= self.config.maintain_time_cost
        return True

    def _pit_stop(self, vehicle: Vehicle) -> bool:
        if vehicle.current_fuel >= vehicle.max_fuel * self.config.pit_stop_fuel_threshold:
            raise PreconditionError("Cannot pit stop - fuel tank is already full")

        vehicle.refuel()
        vehicle.current_speed = 0
        self.time_remaining -= self.config.pit_stop_time_cost
        return True

    def _update_race_state(self) -> None:
        """Advance the circuit, refresh standings and check end conditions."""
        vehicle = self.selected_vehicle

        if vehicle.current_speed > 0:
            lap_completed = self.circuit.advance_progress(vehicle.current_speed)
            if lap_completed and not self.circuit.is_race_completed():
                self.log.log(f"Lap {self.circuit.current_lap - 1} completed!")

        self.update_positions()
        self._check_end_conditions()

    def _check_end_conditions(self) -> None:
        if self.circuit.is_race_completed():
            self._end_race(RESULT_WON)
        elif self.time_remaining <= 0:
            self._end_race(RESULT_TIME_UP)
        elif self.selected_vehicle.current_fuel <= 0:
            self._end_race(RESULT_OUT_OF_FUEL)

    def _end_race(self, result: str) -> None:
        self.status = RaceStatus.ENDED
        self.result = result
        self.log.log(f"Race over: {result}")

    def update_positions(self) -> None:
        """Move AI racers and re-rank every participant by total progress.

        The player mirrors the circuit. AI racers gain a random amount of lap
        progress while the race is active; reaching 100% starts the next lap
        from zero (the overflow is dropped). Ties keep list order.
        """
        player = self.player
        player.current_lap = self.circuit.current_lap
        player.lap_progress = self.circuit.lap_progress

        if self.is_active:
            low, high = self.config.ai_progress_range
            for participant in self.participants:
                if participant.is_player:
                    continue
                participant.lap_progress += float(self.rng.integers(low, high))
                if participant.lap_progress >= 100:
                    participant.lap_progress = 0.0
                    participant.current_lap += 1

        # sorted() is stable, so equal progress keeps list order
        ranked = sorted(self.participants, key=lambda p: p.total_progress, reverse=True)
        for pos, participant in enumerate(ranked, 1):
            participant.position = pos

        logger.debug(
            "Standings: %s",
            ", ".join(f"{p.position}. {p.name} ({p.total_progress:.1f})" for p in ranked),
        )

    def time_percentage(self) -> float:
        """Remaining time as a percentage of the budget."""
        return self.time_remaining / self.max_time * 100

    def player_position_label(self) -> str:
        """Player position with ordinal suffix ("1st", "2nd", ...)."""
        position = self.player.position
        suffixes = {1: "st", 2: "nd", 3: "rd"}
        return f"{position}{suffixes.get(position, 'th')}"
