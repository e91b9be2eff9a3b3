"""Parking - Parking facility serving a set of lifts.

Proportionality rule (ParkingConfig.PROPORTION_THRESHOLD = 30):
    proportionate  <=>  slots // total_capacity < 30

The quotient truncates toward zero. Slots may be negative (no positivity
constraint), in which case floor division and truncation differ, so the
quotient is computed on the absolute value and the sign restored.
"""

from dataclasses import dataclass

from skiarea.constants import ParkingConfig


@dataclass(frozen=True)
class Parking:
    """A parking facility.

    The served-lift relation is owned by the SkiArea, not by the Parking.

    Attributes:
        name: Unique parking name
        slots: Number of parking slots (not validated)
    """

    name: str
    slots: int

    @staticmethod
    def truncated_ratio(slots: int, total_capacity: int) -> int:
        """Integer quotient of slots by capacity, truncated toward zero.

        Args:
            slots: Parking slots (any sign)
            total_capacity: Combined capacity of served lifts, must be > 0

        Returns:
            slots / total_capacity rounded toward zero.
        """
        quotient = abs(slots) // total_capacity
        return -quotient if slots < 0 else quotient

    def is_proportionate(self, total_capacity: int) -> bool:
        """Check the slot count against the combined capacity of served lifts.

        Args:
            total_capacity: Sum of capacities of the served lifts, must be > 0

        Returns:
            True if the truncated slots/capacity ratio is below the threshold.
        """
        ratio = Parking.truncated_ratio(slots=self.slots, total_capacity=total_capacity)
        return ratio < ParkingConfig.PROPORTION_THRESHOLD

    def __repr__(self) -> str:
        return f"Parking({self.name}, {self.slots} slots)"
