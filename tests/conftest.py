"""Shared fixtures for the timerace tests."""

from datetime import datetime

import pytest

from timerace import RaceEngine

FIXED_TIME = datetime(2024, 5, 26, 14, 30, 5)


class FixedRng:
    """Stand-in for numpy's Generator returning a constant AI increment."""

    def __init__(self, value: int = 10):
        self.value = value

    def integers(self, low, high):
        return self.value


@pytest.fixture
def engine():
    """Engine with deterministic AI progress and log timestamps."""
    return RaceEngine(rng=FixedRng(10), clock=lambda: FIXED_TIME)


@pytest.fixture
def started_engine(engine):
    """Engine racing with Lightning McQueen."""
    engine.select_vehicle(engine.available_vehicles[0])
    engine.start_race()
    return engine
