"""Interactive menu for the parking lot."""

import logging
from pathlib import Path
from typing import Callable

from .config import AppConfig, get_config_path, load_config
from .exceptions import DuplicatePlateError, NoSpotAvailableError, VehicleNotFoundError
from .metrics import start_metrics_server
from .state.lot_manager import ParkingLot

logger = logging.getLogger(__name__)

MENU = """
Parking Management System
1. Park Vehicle
2. Remove Vehicle
3. Display Status
4. Exit"""


def park_vehicle(lot: ParkingLot, input_func: Callable, output: Callable) -> None:
    """Prompt for a plate and category and park the vehicle."""
    plate = input_func("Enter license plate: ")
    categories = "/".join(lot.inventory.categories)
    vehicle_type = input_func(f"Enter vehicle type ({categories}): ")

    try:
        lot.park(plate, vehicle_type)
    except NoSpotAvailableError:
        output(f"No available spots for {vehicle_type}!")
    except DuplicatePlateError:
        output(f"Vehicle {plate} is already parked!")
    else:
        output("Vehicle parked successfully!")


def remove_vehicle(lot: ParkingLot, input_func: Callable, output: Callable) -> None:
    """Prompt for a plate, charge the vehicle and remove it."""
    plate = input_func("Enter license plate: ")

    try:
        receipt = lot.exit(plate)
    except VehicleNotFoundError:
        output("Vehicle not found!")
        return

    output(f"Parking charges: ${receipt.charge:.2f}")
    output("Vehicle removed successfully!")


def display_status(lot: ParkingLot, output: Callable) -> None:
    """Print occupancy per category and every parked vehicle."""
    status = lot.status()

    output("\nParking Lot Status:")
    output(f"Total spots: {status.total_spots}")
    for vehicle_type, counts in status.occupancy.items():
        output(f"Occupied {vehicle_type.lower()} spots: {counts.occupied}/{counts.total}")

    output("\nCurrently parked vehicles:")
    for vehicle in status.vehicles:
        output(
            f"License Plate: {vehicle.plate}"
            f" | Type: {vehicle.vehicle_type}"
            f" | Entry Time: {vehicle.entered_at.ctime()}"
        )


def run_session(
    lot: ParkingLot,
    input_func: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> None:
    """
    Read menu choices until the user exits or input runs out.

    Args:
        lot: The parking lot to operate on
        input_func: Prompts and returns one line of user input
        output: Writes one line of text to the user
    """
    while True:
        output(MENU)
        try:
            choice = input_func("Enter choice: ")

            if choice == "1":
                park_vehicle(lot, input_func, output)
            elif choice == "2":
                remove_vehicle(lot, input_func, output)
            elif choice == "3":
                display_status(lot, output)
            elif choice == "4":
                break
            else:
                output("Invalid choice!")
        except EOFError:
            break

    logger.info("Session ended")


def setup_logging(config: AppConfig) -> None:
    """Configure root logging from application config."""
    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename=config.logging.file,
    )


def main():
    """CLI entry point."""
    config_path = get_config_path()
    if config_path.exists():
        config = load_config(config_path)
        setup_logging(config)
        logger.info(f"Loaded configuration from {config_path}")
    else:
        config = AppConfig()
        setup_logging(config)
        logger.info("Using default configuration")

    if config.metrics.enabled:
        start_metrics_server(config.metrics.port)
        logger.info(f"Metrics available on port {config.metrics.port}")

    lot = ParkingLot.from_config(config)
    logger.info(f"Using data file {Path(config.storage.data_file).resolve()}")

    run_session(lot)


if __name__ == "__main__":
    main()
