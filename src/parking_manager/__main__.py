"""Allow running with ``python -m parking_manager``."""

from .cli import main

main()
