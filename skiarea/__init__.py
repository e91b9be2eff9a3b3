"""SkiArea - Catalog of a ski resort's static infrastructure.

Models lift types, lifts, slopes and parkings with their relationships:
- A lift has exactly one lift type
- A slope starts from a lift
- A parking serves a set of lifts

Modules:
    model: Entities (LiftType, Lift, Slope, Parking), errors and the SkiArea catalog
    importers: Bulk import of lift types and lifts from semicolon-delimited text
    constants: Configuration classes

Example:
    from skiarea import SkiArea

    area = SkiArea(name="Val Senales")
    area.read_lifts(path="lifts.txt")
    area.create_parking(name="P1", slots=600)
    area.add_served_lift(parking_name="P1", lift_name="Grawand")
    area.is_parking_proportionate(parking_name="P1")
"""

import logging

from skiarea.constants import LogConfig
from skiarea.model import SkiArea

__all__ = [
    "SkiArea",
    "configure_logging",
]


def configure_logging(level: str | None = None) -> None:
    """Configure process-wide logging for applications using the catalog.

    The library itself only emits records through module loggers.

    Args:
        level: Log level name, defaults to LogConfig.DEFAULT_LEVEL
    """
    logging.basicConfig(
        level=(level or LogConfig.DEFAULT_LEVEL).upper(),
        format=LogConfig.FORMAT,
    )
