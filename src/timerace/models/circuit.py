"""Circuit model with lap tracking."""

from pydantic import BaseModel, Field

# Lap progress points gained per unit of speed
PROGRESS_PER_SPEED = 2.0


class Circuit(BaseModel):
    """Represents the race circuit and the player's progress around it."""

    total_laps: int = Field(default=5, ge=1, description="Number of laps in race")
    lap_distance: float = Field(
        default=10.0,
        gt=0,
        description="Distance per lap in kilometres (informational)",
    )

    # Race state (mutable during simulation)
    current_lap: int = Field(default=1, ge=1, description="Lap currently being driven")
    lap_progress: float = Field(
        default=0.0,
        ge=0.0,
        lt=100.0,
        description="Progress within the current lap (0-100%)",
    )

    def advance_progress(self, speed: int) -> bool:
        """Advance lap progress for one turn at the given speed.

        Progress past 100% carries over into the next lap. At most one lap
        is completed per call; any overflow beyond a full extra lap wraps.

        Args:
            speed: Current vehicle speed

        Returns:
            True if a lap was completed
        """
        self.lap_progress += speed * PROGRESS_PER_SPEED

        if self.lap_progress >= 100:
            self.lap_progress = (self.lap_progress - 100) % 100
            self.current_lap += 1
            return True
        return False

    def is_race_completed(self) -> bool:
        """Check whether every lap has been completed."""
        return self.current_lap > self.total_laps

    def overall_progress(self) -> float:
        """Overall race progress percentage (0-100)."""
        if self.is_race_completed():
            return 100.0

        completed_laps = self.current_lap - 1
        return (completed_laps + self.lap_progress / 100.0) / self.total_laps * 100

    @property
    def display_lap(self) -> int:
        """Lap number for display, capped at the final lap."""
        return min(self.current_lap, self.total_laps)

    def reset(self) -> None:
        """Reset progress for a new race."""
        self.current_lap = 1
        self.lap_progress = 0.0
