"""Saved locations domain model."""

from pydantic import BaseModel, Field

# Alias used for any endpoint not given on the command line.
DEFAULT_LOCATION_ALIAS = "default"


class SavedLocations(BaseModel):
    """Alias table mapping a name to an address or "lat,lon" string.

    Names are matched exactly (case-sensitive). Insertion order is kept.
    """

    locations: dict[str, str] = Field(default_factory=dict)

    def lookup(self, name: str) -> str | None:
        """Return the location stored under name, if any."""
        return self.locations.get(name)

    def set(self, name: str, value: str) -> None:
        """Add or overwrite the location stored under name."""
        self.locations[name] = value
