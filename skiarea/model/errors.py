"""Errors - Exception hierarchy for the SkiArea catalog.

Every failure raised by the catalog or the importer derives from SkiAreaError,
so callers can catch the whole family at once. Each class also derives from
the closest built-in exception (ValueError, LookupError, ZeroDivisionError,
OSError) so generic handlers keep working.

Hierarchy:
    SkiAreaError
    ├── InvalidLiftTypeError (ValueError)
    │   ├── DuplicateLiftTypeError
    │   └── InvalidCapacityError
    ├── UnknownEntityError (LookupError)
    │   ├── UnknownLiftTypeError
    │   ├── UnknownLiftError
    │   ├── UnknownSlopeError
    │   └── UnknownParkingError
    ├── NoServedLiftsError (ZeroDivisionError)
    ├── ImportReadError (OSError)
    └── CapacityParseError (ValueError)
"""

from pathlib import Path


class SkiAreaError(Exception):
    """Base class for all catalog errors."""


# =============================================================================
# Lift type registration
# =============================================================================


class InvalidLiftTypeError(SkiAreaError, ValueError):
    """A lift type could not be registered.

    Attributes:
        code: Lift type code that was rejected
    """

    def __init__(self, code: str, reason: str) -> None:
        self.code = code
        super().__init__(f"Invalid lift type '{code}': {reason}")


class DuplicateLiftTypeError(InvalidLiftTypeError):
    """Lift type code already registered."""

    def __init__(self, code: str) -> None:
        super().__init__(code=code, reason="code already defined")


class InvalidCapacityError(InvalidLiftTypeError):
    """Lift type capacity is zero or negative."""

    def __init__(self, code: str, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(code=code, reason=f"capacity must be > 0, got {capacity}")


# =============================================================================
# Unknown references
# =============================================================================


class UnknownEntityError(SkiAreaError, LookupError):
    """Reference to a name-key missing from its registry.

    Attributes:
        key: The name or code that was looked up
    """

    kind = "entity"

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unknown {self.kind}: '{key}'")


class UnknownLiftTypeError(UnknownEntityError):
    kind = "lift type"


class UnknownLiftError(UnknownEntityError):
    kind = "lift"


class UnknownSlopeError(UnknownEntityError):
    kind = "slope"


class UnknownParkingError(UnknownEntityError):
    kind = "parking"


# =============================================================================
# Parking proportionality
# =============================================================================


class NoServedLiftsError(SkiAreaError, ZeroDivisionError):
    """Proportionality requested for a parking with zero served capacity."""

    def __init__(self, parking_name: str) -> None:
        self.parking_name = parking_name
        super().__init__(f"Parking '{parking_name}' serves no lifts, proportionality is undefined")


# =============================================================================
# Import
# =============================================================================


class ImportReadError(SkiAreaError, OSError):
    """Import file could not be opened or read in full.

    The original OSError (or UnicodeDecodeError) is chained as __cause__.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read lift file {self.path}: {reason}")


class CapacityParseError(SkiAreaError, ValueError):
    """Capacity field of a well-formed lift type line is not an integer.

    Attributes:
        line_number: 1-based line number in the import file
        value: Raw (stripped) capacity text
    """

    def __init__(self, line_number: int, value: str) -> None:
        self.line_number = line_number
        self.value = value
        super().__init__(f"Line {line_number}: capacity '{value}' is not a valid integer")
