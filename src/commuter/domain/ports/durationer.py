"""Durationer port."""

from datetime import timedelta
from typing import Protocol

from commuter.domain.models.travel_mode import TravelMode


class Durationer(Protocol):
    """Port for computing how long a trip takes."""

    async def duration(self, origin: str, destination: str, mode: TravelMode) -> timedelta:
        """Get the travel duration between two locations for a travel mode."""
        ...
