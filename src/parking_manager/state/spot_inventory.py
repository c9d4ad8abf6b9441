"""Fixed inventory of typed parking spots."""

import logging
from typing import Mapping, Optional

from .models import CategoryOccupancy, Spot, SpotStatus

logger = logging.getLogger(__name__)


class SpotInventory:
    """
    Fixed collection of numbered spots, each typed by vehicle category.

    Spots are numbered from 1, category by category, in the order the
    categories are declared. Lookups are linear scans in spot order, so
    the lowest free number always wins.
    """

    def __init__(self, capacities: Mapping[str, int]):
        """
        Build the inventory.

        Args:
            capacities: Mapping of category name to spot count, in declaration order

        Raises:
            ValueError: If a count is not positive
        """
        self.spots: list[Spot] = []
        self._capacities: dict[str, int] = {}

        number = 1
        for vehicle_type, count in capacities.items():
            if count <= 0:
                raise ValueError(f"Spot count for {vehicle_type!r} must be positive, got {count}")
            self._capacities[vehicle_type] = count
            for _ in range(count):
                self.spots.append(Spot(number=number, vehicle_type=vehicle_type))
                number += 1

        logger.info(f"Initialized SpotInventory with {len(self.spots)} spots")

    @property
    def total(self) -> int:
        return len(self.spots)

    @property
    def categories(self) -> list[str]:
        return list(self._capacities)

    def get_spot(self, number: int) -> Spot:
        """
        Get a spot by number.

        Raises:
            KeyError: If no spot has that number
        """
        if 1 <= number <= len(self.spots):
            return self.spots[number - 1]
        raise KeyError(number)

    def find_free(self, vehicle_type: str) -> Optional[int]:
        """Return the lowest-numbered available spot of a category, or None."""
        for spot in self.spots:
            if spot.vehicle_type == vehicle_type and not spot.occupied:
                return spot.number
        return None

    def first_occupied(self, vehicle_type: str) -> Optional[int]:
        """Return the lowest-numbered occupied spot of a category, or None."""
        for spot in self.spots:
            if spot.vehicle_type == vehicle_type and spot.occupied:
                return spot.number
        return None

    def occupy(self, number: int) -> bool:
        """Mark a spot occupied. Returns False if it already was."""
        spot = self.get_spot(number)
        if spot.occupied:
            logger.warning(f"Spot {number} is already occupied")
            return False
        spot.status = SpotStatus.OCCUPIED
        return True

    def vacate(self, number: int) -> bool:
        """Mark a spot available. Returns False if it already was."""
        spot = self.get_spot(number)
        if not spot.occupied:
            logger.warning(f"Spot {number} is already available")
            return False
        spot.status = SpotStatus.AVAILABLE
        return True

    def occupancy(self) -> dict[str, CategoryOccupancy]:
        """Occupied and total counts per category, in declaration order."""
        counts = {vehicle_type: 0 for vehicle_type in self._capacities}
        for spot in self.spots:
            if spot.occupied:
                counts[spot.vehicle_type] += 1

        return {
            vehicle_type: CategoryOccupancy(occupied=counts[vehicle_type], total=total)
            for vehicle_type, total in self._capacities.items()
        }
