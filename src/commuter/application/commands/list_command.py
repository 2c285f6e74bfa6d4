"""List command."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from commuter.domain.models import SavedLocations

if TYPE_CHECKING:
    from commuter.domain.ports import Indicator, StorageProvider

EMPTY_HINT = "No saved locations. Add one with: commuter add -name <alias> -location <address>"


@dataclass
class ListCommand:
    """Show every saved location."""

    store: "StorageProvider"

    def validate(self) -> None:
        """Nothing to check."""

    def entries(self) -> Iterator[tuple[str, str]]:
        """Yield (name, value) pairs in the order they were saved."""
        saved = self.store.load(SavedLocations) or SavedLocations()
        yield from saved.locations.items()

    async def run(self, indicator: "Indicator") -> None:
        """Print one line per saved location."""
        found = False
        for name, value in self.entries():
            found = True
            indicator.indicate(f"{name}: {value}")
        if not found:
            indicator.indicate(EMPTY_HINT)
