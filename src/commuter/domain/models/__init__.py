"""Domain models for commuter."""

from commuter.domain.models.configuration import Configuration
from commuter.domain.models.mode_duration import ModeDuration
from commuter.domain.models.saved_locations import DEFAULT_LOCATION_ALIAS, SavedLocations
from commuter.domain.models.travel_mode import TravelMode

__all__ = [
    "DEFAULT_LOCATION_ALIAS",
    "Configuration",
    "ModeDuration",
    "SavedLocations",
    "TravelMode",
]
