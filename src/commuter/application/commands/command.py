"""Command contract."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from commuter.domain.ports import Indicator


class Command(Protocol):
    """A single operation selected from the command line.

    validate() is always called first; run() is only called if it did not raise.
    """

    def validate(self) -> None:
        """Raise a ValidationError if the command cannot run."""
        ...

    async def run(self, indicator: "Indicator") -> None:
        """Execute the command, reporting results through the indicator."""
        ...
