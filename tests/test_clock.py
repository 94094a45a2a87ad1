"""Tests for the external race clock."""

import pytest

from conftest import FixedRng
from timerace import RaceAction, RaceClock, RaceEngine, RaceStatus


def start(engine, index=0):
    engine.select_vehicle(engine.available_vehicles[index])
    engine.start_race()
    return engine


class TestRaceClock:
    """Test tick forwarding and forced actions."""

    def test_default_interval_from_config(self):
        """Test the clock uses the configured tick interval."""
        clock = RaceClock(RaceEngine(rng=FixedRng()))
        assert clock.interval == 0.5

    def test_tick_drains_time(self):
        """Test each tick removes one interval."""
        engine = start(RaceEngine(rng=FixedRng()))
        clock = RaceClock(engine)

        assert clock.tick()
        assert engine.time_remaining == 299.5

    def test_tick_ignored_before_start(self):
        """Test the clock never starts or changes an idle race."""
        engine = RaceEngine(rng=FixedRng())
        clock = RaceClock(engine)

        assert not clock.tick()
        assert engine.status == RaceStatus.IDLE
        assert engine.time_remaining == 300.0
        assert clock.ticks == 0

    def test_time_runs_out(self):
        """Test ticking to zero forces an action and ends the race on time."""
        engine = start(RaceEngine(max_time=2, rng=FixedRng()))
        clock = RaceClock(engine)

        ticks = clock.run_until_finished()

        assert ticks == 4
        assert engine.status == RaceStatus.ENDED
        assert engine.result == "Time's up! Race over."
        assert "Speed maintained" in [entry.message for entry in engine.log]

    def test_time_clamped_at_zero_before_forced_action(self):
        """Test a tick larger than the remaining time stops at zero."""
        engine = start(RaceEngine(max_time=1, rng=FixedRng()))
        engine.selected_vehicle.current_fuel = 0.5
        clock = RaceClock(engine, interval=5.0)

        clock.tick()

        # forced action fails for lack of fuel, so no time is spent
        assert engine.time_remaining == 0.0
        assert engine.result == "Out of fuel!"

    def test_ticks_stop_after_end(self):
        """Test ticks after the race has ended are ignored."""
        engine = start(RaceEngine(max_time=1, rng=FixedRng()))
        clock = RaceClock(engine)
        clock.run_until_finished()
        ticks = clock.ticks

        assert not clock.tick()
        assert clock.ticks == ticks

    def test_max_ticks(self):
        """Test run_until_finished honours the tick limit."""
        engine = start(RaceEngine(rng=FixedRng()))
        clock = RaceClock(engine)

        assert clock.run_until_finished(max_ticks=3) == 3
        assert engine.time_remaining == 298.5
        assert engine.is_active

    def test_interleaved_with_actions(self):
        """Test ticks and actions both draw from the same time budget."""
        engine = start(RaceEngine(rng=FixedRng()))
        clock = RaceClock(engine)

        engine.execute_action(RaceAction.SPEED_UP)
        clock.tick()
        clock.tick()

        assert engine.time_remaining == 294.0

    def test_invalid_interval(self):
        """Test the interval must be positive."""
        with pytest.raises(ValueError):
            RaceClock(RaceEngine(rng=FixedRng()), interval=0)
