"""Output port."""

from typing import Protocol


class Indicator(Protocol):
    """Port for reporting messages to the user."""

    def indicate(self, message: str) -> None:
        """Show a message."""
        ...
