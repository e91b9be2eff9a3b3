"""Data model classes for the ski area catalog.

- LiftType: Lift category with per-unit capacity (immutable)
- Lift: Named lift referencing one LiftType
- Slope: Named run starting from a lift
- Parking: Parking facility with a slot count
- SkiArea: Central catalog owning all entities
- errors: Exception hierarchy rooted at SkiAreaError
"""

from skiarea.model.errors import (
    CapacityParseError,
    DuplicateLiftTypeError,
    ImportReadError,
    InvalidCapacityError,
    InvalidLiftTypeError,
    NoServedLiftsError,
    SkiAreaError,
    UnknownEntityError,
    UnknownLiftError,
    UnknownLiftTypeError,
    UnknownParkingError,
    UnknownSlopeError,
)
from skiarea.model.lift import Lift
from skiarea.model.lift_type import LiftType
from skiarea.model.parking import Parking
from skiarea.model.ski_area import SkiArea
from skiarea.model.slope import Slope

__all__ = [
    "LiftType",
    "Lift",
    "Slope",
    "Parking",
    "SkiArea",
    # Errors
    "SkiAreaError",
    "InvalidLiftTypeError",
    "DuplicateLiftTypeError",
    "InvalidCapacityError",
    "UnknownEntityError",
    "UnknownLiftTypeError",
    "UnknownLiftError",
    "UnknownSlopeError",
    "UnknownParkingError",
    "NoServedLiftsError",
    "ImportReadError",
    "CapacityParseError",
]
