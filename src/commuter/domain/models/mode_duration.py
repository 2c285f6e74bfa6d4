"""Per-mode commute result."""

from dataclasses import dataclass
from datetime import timedelta

from commuter.domain.models.travel_mode import TravelMode


@dataclass(frozen=True)
class ModeDuration:
    """Outcome of a duration lookup for one travel mode.

    Exactly one of duration and error is set.
    """

    mode: TravelMode
    duration: timedelta | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None
