"""Data models for parking lot state."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class SpotStatus(str, Enum):
    """Status of a parking spot."""

    AVAILABLE = "available"
    OCCUPIED = "occupied"


class Spot(BaseModel):
    """A single numbered space, typed by vehicle category."""

    number: int
    vehicle_type: str
    status: SpotStatus = SpotStatus.AVAILABLE

    @property
    def occupied(self) -> bool:
        return self.status == SpotStatus.OCCUPIED


class Vehicle(BaseModel):
    """One parking session for a vehicle."""

    plate: str
    vehicle_type: str
    entry_time: int  # epoch seconds
    active: bool = True
    spot_number: Optional[int] = None  # not persisted

    @property
    def entered_at(self) -> datetime:
        """Entry time as a local datetime."""
        return datetime.fromtimestamp(self.entry_time)


class CategoryOccupancy(BaseModel):
    """Occupied and total spot counts for one category."""

    occupied: int
    total: int

    @property
    def available(self) -> int:
        return self.total - self.occupied


class LotStatus(BaseModel):
    """Read-only snapshot of the whole lot."""

    total_spots: int
    occupancy: dict[str, CategoryOccupancy]
    vehicles: list[Vehicle]


class ExitReceipt(BaseModel):
    """Result of a successful exit."""

    vehicle: Vehicle
    exit_time: int
    hours: float
    charge: float
    released_spot: Optional[int] = None
