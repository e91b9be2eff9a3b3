"""LiftType - Category of lift with a fixed per-unit capacity.

A LiftType is registered once per code in a SkiArea and shared read-only
by every Lift of that type.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LiftType:
    """Immutable lift type.

    Attributes:
        code: Unique code within a ski area (e.g., "C4")
        category: Lift category (e.g., "Chair", "Cable Cabin", "Ski-lift")
        capacity: Number of skiers carried by a single unit, always > 0

    Example:
        chair = LiftType(code="C4", category="Chair", capacity=4)
    """

    code: str
    category: str
    capacity: int

    def __repr__(self) -> str:
        return f"LiftType({self.code}, {self.category}, cap={self.capacity})"
