"""Race configuration."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class RaceConfig(BaseModel):
    """Tunable rules for a race.

    Defaults reproduce the standard five-lap, five-minute race.
    """

    max_time: float = Field(default=300.0, gt=0, description="Time budget in seconds")
    total_laps: int = Field(default=5, ge=1, description="Number of laps in race")
    lap_distance: float = Field(default=10.0, gt=0, description="Lap length in kilometres")
    log_capacity: int = Field(default=10, ge=1, description="Number of log entries kept")

    # Action rules
    speed_increment: int = Field(default=20, gt=0, description="Speed gained per speed-up")
    speed_up_fuel_multiplier: float = Field(
        default=1.5,
        gt=0,
        description="Fuel multiplier applied when speeding up",
    )
    maintain_fuel_multiplier: float = Field(
        default=1.0,
        gt=0,
        description="Fuel multiplier applied when maintaining speed",
    )
    speed_up_time_cost: float = Field(default=5.0, ge=0, description="Seconds spent speeding up")
    maintain_time_cost: float = Field(default=3.0, ge=0, description="Seconds spent maintaining speed")
    pit_stop_time_cost: float = Field(default=15.0, ge=0, description="Seconds spent in the pits")
    pit_stop_fuel_threshold: float = Field(
        default=0.95,
        gt=0.0,
        le=1.0,
        description="Tank fraction at or above which a pit stop is refused",
    )

    # AI opponents
    ai_progress_range: tuple[int, int] = Field(
        default=(8, 15),
        description="Half-open range of lap progress gained by AI racers per turn",
    )

    # External clock
    tick_interval: float = Field(default=0.5, gt=0, description="Seconds removed per clock tick")

    @field_validator("ai_progress_range")
    @classmethod
    def _check_range(cls, value: tuple[int, int]) -> tuple[int, int]:
        low, high = value
        if low < 0 or high <= low:
            raise ValueError("ai_progress_range must satisfy 0 <= low < high")
        return value

    @classmethod
    def from_json_file(cls, path: str | Path) -> "RaceConfig":
        """Load a configuration from a JSON file."""
        return cls.model_validate_json(Path(path).read_text())
