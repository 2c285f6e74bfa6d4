"""Console adapters for terminal input and output."""

from commuter.adapters.console.console_indicator import ConsoleIndicator
from commuter.adapters.console.stdin_line_reader import StdinLineReader

__all__ = ["ConsoleIndicator", "StdinLineReader"]
