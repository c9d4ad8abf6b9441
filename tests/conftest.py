"""
Shared fixtures for the parking manager test suite.

Provides a controllable clock, a store under tmp_path, and lots with
small capacities so full-lot behaviour is easy to reach.
"""

import pytest

from parking_manager.state.lot_manager import ParkingLot
from parking_manager.storage import VehicleStore

START_TIME = 1_700_000_000


class FakeClock:
    """Callable clock returning epoch seconds, advanced by hand."""

    def __init__(self, now: float = START_TIME):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "parking_data.txt"


@pytest.fixture
def store(data_file):
    return VehicleStore(data_file)


@pytest.fixture
def small_lot(store, clock):
    """One car spot and one motorcycle spot."""
    return ParkingLot({"Car": 1, "Motorcycle": 1}, store=store, clock=clock)


@pytest.fixture
def lot(store, clock):
    """Two car spots and one motorcycle spot."""
    return ParkingLot({"Car": 2, "Motorcycle": 1}, store=store, clock=clock)
