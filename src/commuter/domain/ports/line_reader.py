"""Interactive input port."""

from typing import Protocol


class LineReader(Protocol):
    """Port for reading a line of user input."""

    def read_line(self, prompt: str) -> str:
        """Show prompt and return the line the user typed."""
        ...
