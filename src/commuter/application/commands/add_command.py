"""Add command."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from commuter.domain.errors import MissingFieldError
from commuter.domain.models import SavedLocations

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from commuter.domain.ports import Indicator, StorageProvider


@dataclass
class AddCommand:
    """Save a location under an alias, overwriting any existing entry."""

    store: "StorageProvider"
    name: str = ""
    value: str = ""  # An empty value is accepted

    def validate(self) -> None:
        """Require a name for the alias."""
        if not self.name:
            raise MissingFieldError("name")

    async def run(self, indicator: "Indicator") -> None:
        """Load the alias table, set the entry and save it back."""
        saved = self.store.load(SavedLocations) or SavedLocations()
        if saved.lookup(self.name) is not None:
            logger.info(f"Overwriting saved location '{self.name}'")
        saved.set(self.name, self.value)
        self.store.save(saved)
        indicator.indicate(f"Saved '{self.name}' as {self.value}")
