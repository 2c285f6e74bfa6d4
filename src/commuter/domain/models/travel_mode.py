"""Travel mode domain model."""

from enum import Enum


class TravelMode(str, Enum):
    """Means of transport a duration is computed for.

    Declaration order is the order results are reported in.
    """

    DRIVE = "drive"
    WALK = "walk"
    BIKE = "bike"
    TRANSIT = "transit"

    @property
    def label(self) -> str:
        """Human-readable name used in output."""
        return self.value.capitalize()
