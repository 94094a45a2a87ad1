"""Vehicle model with fuel and speed state."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class VehicleCategory(str, Enum):
    """Vehicle categories."""

    SPORTS = "sports"
    ECO = "eco"
    RACING = "racing"


class Vehicle(BaseModel):
    """Represents a selectable vehicle with fuel and speed state."""

    name: str = Field(..., description="Display name (e.g., 'Mater')")
    category: VehicleCategory = Field(..., description="Vehicle category")

    # Capability (fixed per catalog entry)
    max_speed: int = Field(..., gt=0, description="Top speed in km/h")
    fuel_consumption: float = Field(
        ...,
        gt=0,
        description="Base fuel burned per action in litres",
    )
    max_fuel: float = Field(..., gt=0, description="Tank capacity in litres")

    # Race state (mutable during simulation)
    current_fuel: float = Field(default=0.0, ge=0.0, description="Fuel in tank")
    current_speed: int = Field(default=0, ge=0, description="Current speed in km/h")

    @model_validator(mode="before")
    @classmethod
    def _fill_tank(cls, data: Any) -> Any:
        # New vehicles start with a full tank unless told otherwise
        if isinstance(data, dict) and data.get("current_fuel") is None and "max_fuel" in data:
            data = {**data, "current_fuel": data["max_fuel"]}
        return data

    @model_validator(mode="after")
    def _check_limits(self) -> "Vehicle":
        if self.current_fuel > self.max_fuel:
            raise ValueError("current_fuel cannot exceed max_fuel")
        if self.current_speed > self.max_speed:
            raise ValueError("current_speed cannot exceed max_speed")
        return self

    def consume_fuel(self, multiplier: float = 1.0) -> bool:
        """Burn fuel for one action.

        Args:
            multiplier: Scales the base consumption rate

        Returns:
            True if the fuel was burned, False if the tank holds less than
            the required amount (fuel is left untouched in that case)
        """
        consumption = self.fuel_consumption * multiplier
        if self.current_fuel < consumption:
            return False

        self.current_fuel = max(0.0, self.current_fuel - consumption)
        return True

    def refuel(self) -> None:
        """Fill the tank."""
        self.current_fuel = self.max_fuel

    def accelerate(self, increment: int) -> int:
        """Raise speed by `increment`, capped at max speed. Returns new speed."""
        self.current_speed = min(self.max_speed, self.current_speed + increment)
        return self.current_speed

    def fuel_percentage(self) -> float:
        return self.current_fuel / self.max_fuel * 100

    def reset_race_state(self) -> None:
        """Reset mutable state for a new race."""
        self.current_speed = 0
        self.refuel()
