"""State management module."""

from .models import CategoryOccupancy, ExitReceipt, LotStatus, Spot, SpotStatus, Vehicle
from .spot_inventory import SpotInventory

__all__ = [
    "CategoryOccupancy",
    "ExitReceipt",
    "LotStatus",
    "Spot",
    "SpotInventory",
    "SpotStatus",
    "Vehicle",
]
