"""Prometheus metrics for the parking lot."""

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
    start_http_server,
)

# Create a custom registry to avoid conflicts with default metrics
REGISTRY = CollectorRegistry()

# Park requests by category and outcome
PARK_REQUESTS = Counter(
    "parking_park_requests_total",
    "Total number of park requests",
    ["vehicle_type", "outcome"],
    registry=REGISTRY,
)

# Completed exits by category
VEHICLE_EXITS = Counter(
    "parking_vehicle_exits_total",
    "Total number of vehicles that left the lot",
    ["vehicle_type"],
    registry=REGISTRY,
)

# Charges collected on exit (currency units)
EXIT_CHARGES = Histogram(
    "parking_exit_charge",
    "Charge computed for each exit",
    buckets=(0.5, 1.0, 2.5, 5.0, 10.0, 25.0, 50.0, 100.0),
    registry=REGISTRY,
)

OCCUPIED_SPOTS = Gauge(
    "parking_spots_occupied",
    "Number of occupied spots per category",
    ["vehicle_type"],
    registry=REGISTRY,
)

TOTAL_SPOTS = Gauge(
    "parking_spots_total",
    "Number of spots per category",
    ["vehicle_type"],
    registry=REGISTRY,
)

STORAGE_FAILURES = Counter(
    "parking_storage_failures_total",
    "Number of failed writes to the data file",
    registry=REGISTRY,
)


def record_park_request(vehicle_type: str, parked: bool) -> None:
    """Record the outcome of a park request."""
    outcome = "parked" if parked else "no_spot"
    PARK_REQUESTS.labels(vehicle_type=vehicle_type, outcome=outcome).inc()


def record_exit(vehicle_type: str, charge: float) -> None:
    """Record a completed exit and its charge."""
    VEHICLE_EXITS.labels(vehicle_type=vehicle_type).inc()
    EXIT_CHARGES.observe(charge)


def update_spot_counts(vehicle_type: str, occupied: int, total: int) -> None:
    """Update spot count gauges for one category."""
    OCCUPIED_SPOTS.labels(vehicle_type=vehicle_type).set(occupied)
    TOTAL_SPOTS.labels(vehicle_type=vehicle_type).set(total)


def increment_storage_failures() -> None:
    """Increment storage failure counter."""
    STORAGE_FAILURES.inc()


def start_metrics_server(port: int) -> None:
    """Expose the registry over HTTP on a background thread."""
    start_http_server(port, registry=REGISTRY)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest(REGISTRY)
