"""Configure command."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from commuter.domain.models import Configuration

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from commuter.domain.ports import Indicator, LineReader, StorageProvider

API_KEY_PROMPT = "Enter your Google Maps API key: "


@dataclass
class ConfigureCommand:
    """Prompt for the provider API key and store it."""

    line_reader: "LineReader"
    store: "StorageProvider"

    def validate(self) -> None:
        """Nothing to check."""

    async def run(self, indicator: "Indicator") -> None:
        """Read the API key and save it as the configuration."""
        api_key = self.line_reader.read_line(API_KEY_PROMPT).strip()
        self.store.save(Configuration(api_key=api_key))
        logger.debug("Saved configuration")
        indicator.indicate("Configuration saved.")
