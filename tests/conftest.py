"""Shared pytest fixtures for skiarea tests.

Provides ready-made SkiArea instances and import files.
All fixtures use explicit values with documented rationale.

CAPACITIES:
    Fixture lift types use capacities 30 and 4 so parking boundary math
    stays readable: 900 slots / 30 = 30 (not proportionate),
    899 slots / 30 = 29 (proportionate).
"""

from pathlib import Path

import pytest

from skiarea.model.ski_area import SkiArea


# =============================================================================
# SKI AREA FIXTURES
# =============================================================================


@pytest.fixture
def empty_ski_area() -> SkiArea:
    """Fresh ski area with no entities."""
    return SkiArea(name="Test Area")


@pytest.fixture
def ski_area_with_types() -> SkiArea:
    """Ski area with two lift types.

    - "CAB30": Cable Cabin, 30 skiers per unit
    - "C4": Chair, 4 skiers per unit
    """
    area = SkiArea(name="Test Area")
    area.define_lift_type(code="CAB30", category="Cable Cabin", capacity=30)
    area.define_lift_type(code="C4", category="Chair", capacity=4)
    return area


@pytest.fixture
def ski_area_with_lifts(ski_area_with_types: SkiArea) -> SkiArea:
    """Ski area with three lifts and three slopes.

    Lifts: "Gondola" (CAB30), "Chair A" (C4), "Chair B" (C4)
    Slopes: "Red Run" and "Blue Run" from Gondola, "Black Run" from Chair A.
    Chair B has no slopes.
    """
    area = ski_area_with_types
    area.create_lift(name="Gondola", type_code="CAB30")
    area.create_lift(name="Chair A", type_code="C4")
    area.create_lift(name="Chair B", type_code="C4")
    area.create_slope(name="Red Run", difficulty="red", start_lift="Gondola")
    area.create_slope(name="Blue Run", difficulty="blue", start_lift="Gondola")
    area.create_slope(name="Black Run", difficulty="black", start_lift="Chair A")
    return area


# =============================================================================
# IMPORT FILE FIXTURES
# =============================================================================


@pytest.fixture
def mixed_import_file(tmp_path: Path) -> Path:
    """Import file with valid records, a foreign tag and a short T line.

    Lines 3 (X tag) and 4 (T with only 3 fields) must be skipped.
    """
    path = tmp_path / "lifts.txt"
    path.write_text(
        "T;C1;Chair;4\n"
        "L;Lift1;C1\n"
        "X;garbage;line\n"
        "T;Bad;OnlyThreeFields\n"
        "L;Lift2;C1\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def bad_capacity_import_file(tmp_path: Path) -> Path:
    """Import file whose third line has a non-numeric capacity.

    Lines 1-2 are valid and must remain applied after the abort.
    Line 4 must never be reached.
    """
    path = tmp_path / "bad_capacity.txt"
    path.write_text(
        "T;C1;Chair;4\n"
        "L;Lift1;C1\n"
        "T;C2;Chair;abc\n"
        "L;Lift2;C1\n",
        encoding="utf-8",
    )
    return path
