"""Domain errors raised by the allocation engine."""


class ParkingError(Exception):
    """Base class for all parking lot domain errors."""


class NoSpotAvailableError(ParkingError):
    """Raised when every spot of the requested category is occupied."""

    def __init__(self, vehicle_type: str):
        self.vehicle_type = vehicle_type
        super().__init__(f"No available spots for {vehicle_type}")


class VehicleNotFoundError(ParkingError):
    """Raised when no active vehicle matches the given plate."""

    def __init__(self, plate: str):
        self.plate = plate
        super().__init__(f"Vehicle not found: {plate}")


class DuplicatePlateError(ParkingError):
    """Raised when a plate is already parked and duplicates are rejected."""

    def __init__(self, plate: str):
        self.plate = plate
        super().__init__(f"Vehicle already parked: {plate}")
