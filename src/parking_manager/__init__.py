"""Parking lot occupancy tracking with flat-file persistence."""
