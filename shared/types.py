"""Shared type definitions for the beam spacing calculator."""
from enum import Enum

Point = tuple[float, float]

class AngleMode(Enum):
    """How a beam angle value is to be read."""
    FULL = "full"   # total included cone angle
    HALF = "half"   # already the half-angle

    def half_angle(self, beam_angle: float) -> float:
        """Half-angle in degrees used for the trigonometry."""
        return beam_angle / 2 if self is AngleMode.FULL else beam_angle
