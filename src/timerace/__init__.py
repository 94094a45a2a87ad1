"""Turn-based, time-budgeted racing simulation."""

from .config import RaceConfig
from .errors import InvalidStateError, PreconditionError, RaceError
from .models import Circuit, Participant, Vehicle, VehicleCategory
from .simulation import ActionOutcome, RaceAction, RaceClock, RaceEngine, RaceLog, RaceStatus

__all__ = [
    "ActionOutcome",
    "Circuit",
    "InvalidStateError",
    "Participant",
    "PreconditionError",
    "RaceAction",
    "RaceClock",
    "RaceConfig",
    "RaceEngine",
    "RaceError",
    "RaceLog",
    "RaceStatus",
    "Vehicle",
    "VehicleCategory",
]
