"""Spot allocation, exit charging and persistence sync."""

import logging
import time
from typing import Callable, Optional

from ..config import AppConfig, ReleasePolicy
from ..exceptions import DuplicatePlateError, NoSpotAvailableError, VehicleNotFoundError
from ..metrics import increment_storage_failures, record_exit, record_park_request, update_spot_counts
from ..storage import VehicleStore
from .models import ExitReceipt, LotStatus, Vehicle
from .spot_inventory import SpotInventory

logger = logging.getLogger(__name__)


class ParkingLot:
    """
    Owns the spot inventory and the vehicle session log.

    Every successful park or exit is written through to the store. Records
    are never removed from the log; exiting only marks them inactive.

    With ``ReleasePolicy.FIRST_OF_CATEGORY`` an exit frees the lowest
    occupied spot of the vehicle's category, which is not necessarily the
    spot the vehicle was given. ``ReleasePolicy.ASSIGNED_SPOT`` frees
    exactly the assigned spot.
    """

    def __init__(
        self,
        capacities: dict[str, int],
        hourly_rate: float = 2.50,
        store: Optional[VehicleStore] = None,
        release_policy: ReleasePolicy = ReleasePolicy.FIRST_OF_CATEGORY,
        reject_duplicate_plates: bool = False,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize the lot and replay any persisted vehicles.

        Args:
            capacities: Mapping of category name to spot count
            hourly_rate: Charge per hour of parking
            store: Persistence backend; None keeps state in memory only
            release_policy: Which spot an exit frees
            reject_duplicate_plates: Refuse to park a plate that is already parked
            clock: Returns the current time in epoch seconds
        """
        self.inventory = SpotInventory(capacities)
        self.hourly_rate = hourly_rate
        self.store = store
        self.release_policy = release_policy
        self.reject_duplicate_plates = reject_duplicate_plates
        self._clock = clock
        self.vehicles: list[Vehicle] = []

        if self.store is not None:
            self._replay(self.store.load())

        self._update_gauges()

    @classmethod
    def from_config(cls, config: AppConfig, store: Optional[VehicleStore] = None) -> "ParkingLot":
        """Build a lot from application configuration."""
        if store is None:
            store = VehicleStore(config.storage.data_file)

        return cls(
            capacities=config.lot.categories,
            hourly_rate=config.lot.hourly_rate,
            store=store,
            release_policy=config.lot.release_policy,
            reject_duplicate_plates=config.lot.reject_duplicate_plates,
        )

    def _replay(self, vehicles: list[Vehicle]) -> None:
        """Re-occupy spots for vehicles loaded from the store."""
        for vehicle in vehicles:
            spot_number = self.inventory.find_free(vehicle.vehicle_type)
            if spot_number is None:
                # Kept active so it can still exit and be charged
                logger.warning(
                    f"No free {vehicle.vehicle_type} spot for stored vehicle {vehicle.plate}"
                )
            else:
                self.inventory.occupy(spot_number)
                vehicle.spot_number = spot_number
            self.vehicles.append(vehicle)

        if vehicles:
            logger.info(f"Restored {len(vehicles)} parked vehicle(s)")

    def _now(self) -> int:
        return int(self._clock())

    def _find_active(self, plate: str) -> Optional[Vehicle]:
        for vehicle in self.vehicles:
            if vehicle.active and vehicle.plate == plate:
                return vehicle
        return None

    def _persist(self) -> None:
        if self.store is None:
            return
        try:
            self.store.save(self.vehicles)
        except (OSError, ValueError) as e:
            increment_storage_failures()
            logger.warning(f"Failed to save parking data to {self.store.path}: {e}")

    def _update_gauges(self) -> None:
        for vehicle_type, counts in self.inventory.occupancy().items():
            update_spot_counts(vehicle_type, counts.occupied, counts.total)

    def calculate_charge(self, entry_time: int, exit_time: int) -> float:
        """Elapsed hours times the hourly rate, unrounded."""
        return (exit_time - entry_time) / 3600.0 * self.hourly_rate

    def park(self, plate: str, vehicle_type: str) -> Vehicle:
        """
        Park a vehicle in the first free spot of its category.

        Args:
            plate: License plate, taken as-is
            vehicle_type: Category name, matched exactly

        Returns:
            The new active vehicle record

        Raises:
            NoSpotAvailableError: If every spot of the category is occupied
            DuplicatePlateError: If the plate is parked and duplicates are rejected
        """
        if self.reject_duplicate_plates and self._find_active(plate) is not None:
            raise DuplicatePlateError(plate)

        spot_number = self.inventory.find_free(vehicle_type)
        if spot_number is None:
            record_park_request(vehicle_type, parked=False)
            raise NoSpotAvailableError(vehicle_type)

        vehicle = Vehicle(
            plate=plate,
            vehicle_type=vehicle_type,
            entry_time=self._now(),
            spot_number=spot_number,
        )
        self.vehicles.append(vehicle)
        self.inventory.occupy(spot_number)
        self._persist()

        record_park_request(vehicle_type, parked=True)
        self._update_gauges()
        logger.info(f"Parked {plate} ({vehicle_type}) in spot {spot_number}")

        return vehicle

    def exit(self, plate: str) -> ExitReceipt:
        """
        Remove a parked vehicle and charge it for the elapsed time.

        Args:
            plate: License plate of an active vehicle

        Returns:
            Receipt with the charge and the spot that was freed

        Raises:
            VehicleNotFoundError: If no active vehicle has this plate
        """
        vehicle = self._find_active(plate)
        if vehicle is None:
            raise VehicleNotFoundError(plate)

        exit_time = self._now()
        charge = self.calculate_charge(vehicle.entry_time, exit_time)

        vehicle.active = False

        if self.release_policy == ReleasePolicy.ASSIGNED_SPOT:
            released = vehicle.spot_number
        else:
            released = self.inventory.first_occupied(vehicle.vehicle_type)

        if released is not None:
            self.inventory.vacate(released)

        self._persist()

        record_exit(vehicle.vehicle_type, charge)
        self._update_gauges()
        logger.info(f"Vehicle {plate} left spot {released}, charge {charge:.2f}")

        return ExitReceipt(
            vehicle=vehicle.model_copy(),
            exit_time=exit_time,
            hours=(exit_time - vehicle.entry_time) / 3600.0,
            charge=charge,
            released_spot=released,
        )

    def active_vehicles(self) -> list[Vehicle]:
        """Active vehicles in the order they were parked."""
        return [v for v in self.vehicles if v.active]

    def status(self) -> LotStatus:
        """Get a snapshot of occupancy and parked vehicles."""
        return LotStatus(
            total_spots=self.inventory.total,
            occupancy=self.inventory.occupancy(),
            vehicles=[v.model_copy() for v in self.active_vehicles()],
        )
