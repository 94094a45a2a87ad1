"""Race participant model."""

from pydantic import BaseModel, Field


class Participant(BaseModel):
    """One competitor in the standings, either the player or an AI racer."""

    name: str = Field(..., description="Display name")
    is_player: bool = Field(default=False, description="Whether this is the player")

    # Race state (mutable during simulation)
    current_lap: int = Field(default=1, ge=1, description="Lap currently being driven")
    lap_progress: float = Field(default=0.0, ge=0.0, description="Progress within the lap (0-100%)")
    position: int = Field(default=1, ge=1, description="Current race position")

    @property
    def total_progress(self) -> float:
        """Progress metric used for ranking."""
        return (self.current_lap - 1) * 100 + self.lap_progress

    def reset_race_state(self) -> None:
        """Reset mutable state for a new race."""
        self.current_lap = 1
        self.lap_progress = 0.0
        self.position = 1
