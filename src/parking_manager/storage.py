"""Flat-file persistence for active vehicles."""

import logging
import os
import re
from pathlib import Path
from typing import Iterable

from .state.models import Vehicle

logger = logging.getLogger(__name__)

DELIMITER = ","
ENCODING = "utf-8"
# Undecodable bytes from input() survive a save/load round trip
ENCODING_ERRORS = "surrogateescape"

EPOCH_SECONDS = re.compile(r"-?[0-9]+")


class VehicleStore:
    """
    Line-oriented store of currently parked vehicles.

    Each line is ``plate,vehicle_type,entry_epoch_seconds``. The whole file
    is rewritten on every save; plates containing the delimiter are not
    escaped and will not load back.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def save(self, vehicles: Iterable[Vehicle]) -> None:
        """
        Overwrite the store with every active vehicle.

        Args:
            vehicles: Vehicle records; inactive ones are skipped

        Raises:
            OSError: If the file cannot be written
            ValueError: If a plate or type cannot be encoded
        """
        lines = [
            DELIMITER.join((v.plate, v.vehicle_type, str(v.entry_time))) + "\n"
            for v in vehicles
            if v.active
        ]

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            with open(tmp_path, "w", encoding=ENCODING, errors=ENCODING_ERRORS) as f:
                f.writelines(lines)
            os.replace(tmp_path, self.path)
        except (OSError, ValueError):
            tmp_path.unlink(missing_ok=True)
            raise

        logger.debug(f"Saved {len(lines)} vehicle(s) to {self.path}")

    def load(self) -> list[Vehicle]:
        """
        Read active vehicles from the store.

        Lines that do not have exactly three fields, or whose entry time is
        not a plain integer, are skipped. A missing or unreadable file
        yields an empty list.
        """
        if not self.path.exists():
            logger.info(f"No data file at {self.path}, starting empty")
            return []

        try:
            with open(self.path, encoding=ENCODING, errors=ENCODING_ERRORS) as f:
                lines = f.readlines()
        except OSError as e:
            logger.warning(f"Could not read data file {self.path}: {e}")
            return []

        vehicles = []
        for line_no, line in enumerate(lines, start=1):
            fields = line.rstrip("\r\n").split(DELIMITER)
            if len(fields) != 3:
                logger.debug(f"Skipping malformed line {line_no}: {line!r}")
                continue

            plate, vehicle_type, entry_time = fields
            if not EPOCH_SECONDS.fullmatch(entry_time):
                logger.debug(f"Skipping line {line_no} with bad entry time: {entry_time!r}")
                continue

            vehicles.append(
                Vehicle(plate=plate, vehicle_type=vehicle_type, entry_time=int(entry_time))
            )

        logger.info(f"Loaded {len(vehicles)} vehicle(s) from {self.path}")
        return vehicles
