"""Fixed-interval clock that drains race time."""

import logging

from timerace.simulation.engine import RaceEngine

logger = logging.getLogger(__name__)


class RaceClock:
    """Forwards fixed-size ticks to a race engine.

    The clock never sleeps or starts a race; the host decides when to call
    `tick` (e.g. from a GUI timer or a loop).
    """

    def __init__(self, engine: RaceEngine, interval: float | None = None):
        """Initialize the clock.

        Args:
            engine: Engine receiving the ticks
            interval: Seconds removed per tick (defaults to engine.config.tick_interval)
        """
        self.engine = engine
        self.interval = interval if interval is not None else engine.config.tick_interval
        if self.interval <= 0:
            raise ValueError("interval must be positive")
        self.ticks = 0

    def tick(self) -> bool:
        """Forward one tick. Returns whether the race is still active."""
        if not self.engine.is_active:
            return False

        self.ticks += 1
        return self.engine.tick(self.interval)

    def run_until_finished(self, max_ticks: int | None = None) -> int:
        """Tick until the race ends or `max_ticks` is reached.

        Returns:
            Number of ticks forwarded
        """
        count = 0
        while self.engine.is_active and (max_ticks is None or count < max_ticks):
            self.tick()
            count += 1

        logger.debug("Clock stopped after %d ticks", count)
        return count
