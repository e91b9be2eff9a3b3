"""SkiArea - Central catalog for ski area infrastructure.

Owns the lift type, lift, slope and parking registries plus the
parking -> served lifts relation. Provides operations for:
- Defining lift types and creating lifts, slopes and parkings
- Querying entities by name-key
- Parking proportionality checks
- Bulk import of lift types and lifts from a text file

Registries are plain dicts owned by one SkiArea instance, so independent
catalogs can coexist. Enumerations are sorted explicitly.

Duplicate names:
- Lift type codes are strict (DuplicateLiftTypeError).
- Lift, slope and parking names are silently overwritten (logged).
  Overwriting a parking resets its served lifts.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from skiarea.model.errors import (
    DuplicateLiftTypeError,
    InvalidCapacityError,
    NoServedLiftsError,
    UnknownLiftError,
    UnknownLiftTypeError,
    UnknownParkingError,
    UnknownSlopeError,
)
from skiarea.model.lift import Lift
from skiarea.model.lift_type import LiftType
from skiarea.model.parking import Parking
from skiarea.model.slope import Slope

if TYPE_CHECKING:
    from skiarea.importers.lift_importer import ImportSummary

logger = logging.getLogger(__name__)


class SkiArea:
    """Catalog of a ski area's static infrastructure.

    Not thread-safe; callers must serialize access.

    Example:
        area = SkiArea(name="Val Senales")
        area.define_lift_type(code="C4", category="Chair", capacity=4)
        area.create_lift(name="Grawand", type_code="C4")
        area.create_slope(name="Teufelsegg", difficulty="red", start_lift="Grawand")
    """

    def __init__(self, name: str) -> None:
        """Initialize empty ski area.

        Args:
            name: Display name of the ski area
        """
        self.name = name
        self.lift_types: dict[str, LiftType] = {}
        self.lifts: dict[str, Lift] = {}
        self.slopes: dict[str, Slope] = {}
        self.parkings: dict[str, Parking] = {}
        self.parking_lifts: dict[str, list[Lift]] = {}

    # =========================================================================
    # Lookup helpers
    # =========================================================================

    def get_lift_type(self, code: str) -> LiftType:
        """Return the lift type registered under code.

        Raises:
            UnknownLiftTypeError: If the code has not been defined.
        """
        lift_type = self.lift_types.get(code)
        if lift_type is None:
            raise UnknownLiftTypeError(code)
        return lift_type

    def _get_lift(self, name: str) -> Lift:
        lift = self.lifts.get(name)
        if lift is None:
            raise UnknownLiftError(name)
        return lift

    def _get_slope(self, name: str) -> Slope:
        slope = self.slopes.get(name)
        if slope is None:
            raise UnknownSlopeError(name)
        return slope

    def _get_parking(self, name: str) -> Parking:
        parking = self.parkings.get(name)
        if parking is None:
            raise UnknownParkingError(name)
        return parking

    # =========================================================================
    # Lift Type Operations
    # =========================================================================

    def define_lift_type(self, code: str, category: str, capacity: int) -> LiftType:
        """Define a new lift type.

        Args:
            code: Unique type code
            category: Lift category (Cable Cabin, Chair, Ski-lift, ...)
            capacity: Number of skiers carried by a single unit

        Returns:
            Created LiftType.

        Raises:
            DuplicateLiftTypeError: If the code is already defined.
            InvalidCapacityError: If capacity <= 0.
        """
        if code in self.lift_types:
            raise DuplicateLiftTypeError(code)
        if capacity <= 0:
            raise InvalidCapacityError(code, capacity)

        lift_type = LiftType(code=code, category=category, capacity=capacity)
        self.lift_types[code] = lift_type
        logger.info(f"Lift type defined: {code} ({category}, capacity={capacity})")
        return lift_type

    def get_category(self, code: str) -> str:
        """Category of a lift type.

        Raises:
            UnknownLiftTypeError: If the code has not been defined.
        """
        return self.get_lift_type(code=code).category

    def get_capacity(self, code: str) -> int:
        """Per-unit capacity of a lift type.

        Raises:
            UnknownLiftTypeError: If the code has not been defined.
        """
        return self.get_lift_type(code=code).capacity

    def list_type_codes(self) -> list[str]:
        """All lift type codes, sorted."""
        return sorted(self.lift_types)

    # =========================================================================
    # Lift Operations
    # =========================================================================

    def create_lift(self, name: str, type_code: str) -> Lift:
        """Create a lift of a defined type.

        An existing lift with the same name is replaced.

        Args:
            name: Lift name
            type_code: Code of a previously defined lift type

        Returns:
            Created Lift.

        Raises:
            UnknownLiftTypeError: If the type code has not been defined.
        """
        lift_type = self.get_lift_type(code=type_code)

        if name in self.lifts:
            logger.info(f"Lift {name} replaced (was {self.lifts[name].type_code}, now {type_code})")

        lift = Lift(name=name, lift_type=lift_type)
        self.lifts[name] = lift
        logger.info(f"Lift created: {name} ({type_code})")
        return lift

    def get_type(self, lift_name: str) -> str:
        """Type code of a lift.

        Raises:
            UnknownLiftError: If the lift does not exist.
        """
        return self._get_lift(name=lift_name).type_code

    def list_lift_names(self) -> list[str]:
        """All lift names, sorted alphabetically."""
        return sorted(self.lifts)

    # =========================================================================
    # Slope Operations
    # =========================================================================

    def create_slope(self, name: str, difficulty: str, start_lift: str) -> Slope:
        """Create a slope starting from an existing lift.

        An existing slope with the same name is replaced.

        Args:
            name: Slope name
            difficulty: Difficulty rating
            start_lift: Name of the lift the slope starts from

        Returns:
            Created Slope.

        Raises:
            UnknownLiftError: If the start lift does not exist.
        """
        if start_lift not in self.lifts:
            raise UnknownLiftError(start_lift)

        if name in self.slopes:
            logger.info(f"Slope {name} replaced")

        slope = Slope(name=name, difficulty=difficulty, start_lift=start_lift)
        self.slopes[name] = slope
        logger.info(f"Slope created: {name}, difficulty={difficulty}, from {start_lift}")
        return slope

    def get_difficulty(self, slope_name: str) -> str:
        """Difficulty of a slope.

        Raises:
            UnknownSlopeError: If the slope does not exist.
        """
        return self._get_slope(name=slope_name).difficulty

    def get_start_lift(self, slope_name: str) -> str:
        """Name of the lift a slope starts from.

        Raises:
            UnknownSlopeError: If the slope does not exist.
        """
        return self._get_slope(name=slope_name).start_lift

    def list_slope_names(self) -> list[str]:
        """All slope names, sorted."""
        return sorted(self.slopes)

    def slopes_from(self, lift_name: str) -> list[str]:
        """Slopes starting from a given lift.

        Unknown lifts and lifts without slopes both yield an empty list.

        Args:
            lift_name: Name of the starting lift

        Returns:
            Sorted slope names whose start lift equals lift_name.
        """
        return sorted(name for name, slope in self.slopes.items() if slope.starts_from(lift_name=lift_name))

    # =========================================================================
    # Parking Operations
    # =========================================================================

    def create_parking(self, name: str, slots: int) -> Parking:
        """Create a parking with no served lifts.

        An existing parking with the same name is replaced and its
        served lifts are cleared.

        Args:
            name: Parking name
            slots: Number of slots

        Returns:
            Created Parking.
        """
        if name in self.parkings:
            logger.info(f"Parking {name} replaced, served lifts cleared")

        parking = Parking(name=name, slots=slots)
        self.parkings[name] = parking
        self.parking_lifts[name] = []
        logger.info(f"Parking created: {name}, {slots} slots")
        return parking

    def get_parking_slots(self, parking_name: str) -> int:
        """Number of slots of a parking.

        Raises:
            UnknownParkingError: If the parking does not exist.
        """
        return self._get_parking(name=parking_name).slots

    def list_parking_names(self) -> list[str]:
        """All parking names, sorted."""
        return sorted(self.parkings)

    def add_served_lift(self, parking_name: str, lift_name: str) -> None:
        """Mark a lift as served by a parking.

        Duplicates are kept: adding the same lift twice counts its
        capacity twice in total_served_capacity().
        The Lift instance is captured now, so recreating the lift later
        does not change what the parking serves.

        Raises:
            UnknownParkingError: If the parking does not exist.
            UnknownLiftError: If the lift does not exist.
        """
        self._get_parking(name=parking_name)
        lift = self._get_lift(name=lift_name)
        self.parking_lifts[parking_name].append(lift)
        logger.debug(f"Lift {lift_name} served by parking {parking_name}")

    def served_lifts(self, parking_name: str) -> list[str]:
        """Lifts served by a parking, in insertion order.

        Raises:
            UnknownParkingError: If the parking does not exist.
        """
        self._get_parking(name=parking_name)
        return [lift.name for lift in self.parking_lifts[parking_name]]

    def total_served_capacity(self, parking_name: str) -> int:
        """Sum of the type capacities of the lifts served by a parking.

        Raises:
            UnknownParkingError: If the parking does not exist.
        """
        self._get_parking(name=parking_name)
        return sum(lift.capacity for lift in self.parking_lifts[parking_name])

    def is_parking_proportionate(self, parking_name: str) -> bool:
        """Check whether a parking is proportionate to the lifts it serves.

        A parking is proportionate if its slots divided (integer division)
        by the total capacity of its served lifts is less than 30.

        Args:
            parking_name: Name of the parking to check

        Returns:
            True if the parking is proportionate.

        Raises:
            UnknownParkingError: If the parking does not exist.
            NoServedLiftsError: If the parking serves no lifts.
        """
        parking = self._get_parking(name=parking_name)
        total_capacity = self.total_served_capacity(parking_name=parking_name)
        if total_capacity == 0:
            raise NoServedLiftsError(parking_name)
        return parking.is_proportionate(total_capacity=total_capacity)

    # =========================================================================
    # Import
    # =========================================================================

    def read_lifts(self, path: str | Path) -> "ImportSummary":
        """Read lift types and lifts from a text file.

        Each line starts with "T" (lift type: code;category;capacity) or
        "L" (lift: name;type code), fields separated by ";". Lines with an
        unknown tag or too few fields are skipped.

        Args:
            path: Path of the import file

        Returns:
            ImportSummary with counts and skipped line numbers.

        Raises:
            ImportReadError: If the file cannot be read.
            CapacityParseError: If a capacity is not an integer.
            InvalidLiftTypeError: On duplicate type code or invalid capacity.
            UnknownLiftTypeError: If a lift references an undefined type.
        """
        from skiarea.importers.lift_importer import LiftImporter

        return LiftImporter(area=self).read(path=path)

    # =========================================================================
    # Statistics
    # =========================================================================

    def get_stats(self) -> dict:
        """Get ski area statistics."""
        return {
            "name": self.name,
            "total_lift_types": len(self.lift_types),
            "total_lifts": len(self.lifts),
            "total_slopes": len(self.slopes),
            "total_parkings": len(self.parkings),
            "total_parking_slots": sum(p.slots for p in self.parkings.values()),
        }

    def __repr__(self) -> str:
        return f"SkiArea({self.name}, {len(self.lifts)} lifts, {len(self.slopes)} slopes)"
