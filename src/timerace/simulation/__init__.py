"""Simulation engine components."""

from .clock import RaceClock
from .engine import ActionOutcome, RaceAction, RaceEngine, RaceStatus
from .log import LogEntry, RaceLog

__all__ = [
    "ActionOutcome",
    "LogEntry",
    "RaceAction",
    "RaceClock",
    "RaceEngine",
    "RaceLog",
    "RaceStatus",
]
