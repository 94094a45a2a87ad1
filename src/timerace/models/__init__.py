"""Data models for the racing simulation."""

from .circuit import Circuit
from .participant import Participant
from .vehicle import Vehicle, VehicleCategory

__all__ = [
    "Circuit",
    "Participant",
    "Vehicle",
    "VehicleCategory",
]
