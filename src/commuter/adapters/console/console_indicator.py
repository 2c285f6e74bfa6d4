"""Console output adapter."""

import sys
from typing import TextIO

from commuter.domain.ports.indicator import Indicator


class ConsoleIndicator(Indicator):
    """Writes messages to a text stream, stdout by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize with the stream to write to.

        Args:
            stream: Output stream. Resolved to sys.stdout at write time when None.
        """
        self._stream = stream

    def indicate(self, message: str) -> None:
        """Write the message as one line."""
        print(message, file=self._stream or sys.stdout)
