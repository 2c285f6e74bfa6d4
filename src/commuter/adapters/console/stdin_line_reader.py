"""Interactive input adapter."""

from commuter.domain.errors import CommuterError
from commuter.domain.ports.line_reader import LineReader


class StdinLineReader(LineReader):
    """Reads a line from standard input."""

    def read_line(self, prompt: str) -> str:
        """Prompt on the terminal and read one line."""
        try:
            return input(prompt)
        except EOFError:
            raise CommuterError("no input received") from None
