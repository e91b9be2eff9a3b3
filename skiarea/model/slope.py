"""Slope - Ski run starting from a lift.

The start lift is stored by name; the SkiArea guarantees it exists
when the slope is created.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Slope:
    """A ski slope.

    Attributes:
        name: Unique slope name
        difficulty: Difficulty rating (free text, e.g., "blue", "red")
        start_lift: Name of the lift the slope starts from

    Example:
        slope = Slope(name="Panorama", difficulty="red", start_lift="Gondola Nord")
    """

    name: str
    difficulty: str
    start_lift: str

    def starts_from(self, lift_name: str) -> bool:
        """Whether this slope starts at the given lift."""
        return self.start_lift == lift_name
