"""Commands resolved from the command line."""

from commuter.application.commands.add_command import AddCommand
from commuter.application.commands.command import Command
from commuter.application.commands.commute_command import CommuteCommand
from commuter.application.commands.configure_command import ConfigureCommand
from commuter.application.commands.list_command import ListCommand

__all__ = [
    "AddCommand",
    "Command",
    "CommuteCommand",
    "ConfigureCommand",
    "ListCommand",
]
