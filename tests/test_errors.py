"""Tests for the skiarea exception hierarchy.

Checks that every error is catchable both as SkiAreaError and as the
matching built-in exception, and that messages name the offending key.
"""

import pytest

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


class TestHierarchy:
    """Base classes of each error."""

    @pytest.mark.parametrize(
        "error, builtin",
        [
            (DuplicateLiftTypeError("C4"), ValueError),
            (InvalidCapacityError("C4", 0), ValueError),
            (UnknownLiftTypeError("C4"), LookupError),
            (UnknownLiftError("Gondola"), LookupError),
            (UnknownSlopeError("Red Run"), LookupError),
            (UnknownParkingError("P1"), LookupError),
            (NoServedLiftsError("P1"), ZeroDivisionError),
            (ImportReadError("lifts.txt", "No such file"), OSError),
            (CapacityParseError(3, "abc"), ValueError),
        ],
    )
    def test_catchable_as_builtin_and_base(self, error: SkiAreaError, builtin: type) -> None:
        assert isinstance(error, SkiAreaError)
        assert isinstance(error, builtin)

    def test_lift_type_errors_share_base(self) -> None:
        assert issubclass(DuplicateLiftTypeError, InvalidLiftTypeError)
        assert issubclass(InvalidCapacityError, InvalidLiftTypeError)

    def test_unknown_errors_share_base(self) -> None:
        for cls in (UnknownLiftTypeError, UnknownLiftError, UnknownSlopeError, UnknownParkingError):
            assert issubclass(cls, UnknownEntityError)


class TestMessages:
    """Human-readable messages."""

    def test_unknown_message(self) -> None:
        """Message names the entity kind and key."""
        assert str(UnknownLiftError("Gondola")) == "Unknown lift: 'Gondola'"
        assert str(UnknownParkingError("P1")) == "Unknown parking: 'P1'"

    def test_key_attribute(self) -> None:
        assert UnknownSlopeError("Red Run").key == "Red Run"

    def test_invalid_capacity_message(self) -> None:
        error = InvalidCapacityError("C4", -2)
        assert error.code == "C4" and error.capacity == -2
        assert "capacity must be > 0, got -2" in str(error)

    def test_duplicate_message(self) -> None:
        assert str(DuplicateLiftTypeError("C4")) == "Invalid lift type 'C4': code already defined"

    def test_import_read_message(self) -> None:
        error = ImportReadError("lifts.txt", "No such file")
        assert str(error) == "Cannot read lift file lifts.txt: No such file"

    def test_capacity_parse_message(self) -> None:
        assert str(CapacityParseError(3, "abc")) == "Line 3: capacity 'abc' is not a valid integer"
