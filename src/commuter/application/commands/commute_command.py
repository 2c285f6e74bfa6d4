"""Commute command."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from commuter.application.formatting import format_duration
from commuter.domain.errors import ConflictingInputError, NoTransportSelectedError
from commuter.domain.models import (
    DEFAULT_LOCATION_ALIAS,
    ModeDuration,
    SavedLocations,
    TravelMode,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from commuter.domain.ports import Durationer, Indicator, Locator, StorageProvider


async def resolve_endpoint(
    value: str, use_current: bool, saved: SavedLocations, locator: "Locator"
) -> str:
    """Turn an endpoint into a location string the provider understands.

    The current position wins over any alias or address. Otherwise a saved
    alias is replaced by its stored value and anything else is passed
    through unchanged.
    """
    if use_current:
        latitude, longitude = await locator.current_location()
        return f"{latitude},{longitude}"

    stored = saved.lookup(value)
    if stored is None:
        logger.debug(f"No saved location named '{value}', using it as an address")
        return value
    return stored


@dataclass
class CommuteCommand:
    """Report how long it takes to get from one location to another."""

    durationer: "Durationer"
    locator: "Locator"
    store: "StorageProvider"
    from_: str = DEFAULT_LOCATION_ALIAS
    to: str = DEFAULT_LOCATION_ALIAS
    from_current: bool = False
    to_current: bool = False
    from_explicit: bool = False
    to_explicit: bool = False
    drive: bool = False
    walk: bool = False
    bike: bool = False
    transit: bool = False

    def validate(self) -> None:
        """Reject an endpoint given both explicitly and as the current location.

        An endpoint counts as explicit when it was given on the command line,
        even if its value is the default alias.
        """
        if self.from_current and self.from_explicit:
            raise ConflictingInputError("-from", "-from-current")
        if self.to_current and self.to_explicit:
            raise ConflictingInputError("-to", "-to-current")
        if not self.modes():
            raise NoTransportSelectedError()

    def modes(self) -> list[TravelMode]:
        """Selected travel modes in reporting order."""
        selected = {
            TravelMode.DRIVE: self.drive,
            TravelMode.WALK: self.walk,
            TravelMode.BIKE: self.bike,
            TravelMode.TRANSIT: self.transit,
        }
        return [mode for mode in TravelMode if selected[mode]]

    async def _mode_duration(self, origin: str, destination: str, mode: TravelMode) -> ModeDuration:
        try:
            duration = await self.durationer.duration(origin, destination, mode)
        except Exception as e:
            logger.warning(f"{mode.label} duration lookup failed: {e}")
            return ModeDuration(mode=mode, error=str(e) or e.__class__.__name__)
        return ModeDuration(mode=mode, duration=duration)

    async def durations(self) -> list[ModeDuration]:
        """Look up every selected mode concurrently.

        A failed lookup is recorded on its own result and does not affect
        the others. Results follow the order of modes().
        """
        saved = self.store.load(SavedLocations) or SavedLocations()
        origin = await resolve_endpoint(self.from_, self.from_current, saved, self.locator)
        destination = await resolve_endpoint(self.to, self.to_current, saved, self.locator)
        logger.debug(f"Commuting from '{origin}' to '{destination}'")

        return list(
            await asyncio.gather(
                *(self._mode_duration(origin, destination, mode) for mode in self.modes())
            )
        )

    async def run(self, indicator: "Indicator") -> None:
        """Print one line per selected travel mode."""
        for result in await self.durations():
            if result.failed:
                indicator.indicate(f"{result.mode.label}: failed ({result.error})")
            elif result.duration is not None:
                indicator.indicate(f"{result.mode.label}: {format_duration(result.duration)}")
