"""Lift - Named ski lift installation of a given type."""

from dataclasses import dataclass

from skiarea.model.lift_type import LiftType


@dataclass(frozen=True)
class Lift:
    """A ski lift.

    Holds a non-owning reference to its LiftType; the SkiArea owns the type.

    Attributes:
        name: Unique lift name
        lift_type: Type of the lift, registered before the lift
    """

    name: str
    lift_type: LiftType

    @property
    def type_code(self) -> str:
        """Code of the lift's type."""
        return self.lift_type.code

    @property
    def capacity(self) -> int:
        """Per-unit capacity delegated from the type."""
        return self.lift_type.capacity

    def __repr__(self) -> str:
        return f"Lift({self.name}, {self.type_code})"
