"""Locator port."""

from typing import Protocol


class Locator(Protocol):
    """Port for finding the device's current position."""

    async def current_location(self) -> tuple[float, float]:
        """Get the current (latitude, longitude)."""
        ...
