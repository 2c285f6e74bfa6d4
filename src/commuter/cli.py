"""Command-line argument resolution.

Decides which command to run from the raw arguments and the stored
configuration, and builds it with its collaborators.
"""

import argparse
import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from commuter.application.commands import (
    AddCommand,
    Command,
    CommuteCommand,
    ConfigureCommand,
    ListCommand,
)
from commuter.domain.models import DEFAULT_LOCATION_ALIAS, Configuration

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from commuter.domain.ports import LineReader, Router, StorageProvider

PROG = "commuter"

CMD_ADD = "add"
CMD_LIST = "list"
CMD_COMMUTE = "commute"

COMMUTE_EPILOG = """
Examples:
  # Configure the Google Maps API key
  commuter

  # Save locations
  commuter add -name default -location "123 Main St."
  commuter add -name work -location "1 Infinite Loop, Cupertino"

  # Show saved locations
  commuter list

  # Drive from the default location to work
  commuter -to work
  commuter commute -to work

  # Walk and bike from your current location to an address
  commuter -from-current -to "456 Other St." -walk -bike
"""

RouterFactory = Callable[[Configuration], "Router"]


def _build_commute_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Show how long it takes to get from one location to another.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=COMMUTE_EPILOG,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-from",
        "--from",
        dest="from_",
        help=f"Starting location: a saved alias or an address (default: {DEFAULT_LOCATION_ALIAS})",
    )
    parser.add_argument(
        "-from-current",
        "--from-current",
        dest="from_current",
        action="store_true",
        help="Start from your current location",
    )
    parser.add_argument(
        "-to",
        "--to",
        dest="to",
        help=f"Destination: a saved alias or an address (default: {DEFAULT_LOCATION_ALIAS})",
    )
    parser.add_argument(
        "-to-current",
        "--to-current",
        dest="to_current",
        action="store_true",
        help="Travel to your current location",
    )
    parser.add_argument(
        "-drive", "--drive", action="store_true", help="Driving duration (default mode)"
    )
    parser.add_argument("-walk", "--walk", action="store_true", help="Walking duration")
    parser.add_argument("-bike", "--bike", action="store_true", help="Cycling duration")
    parser.add_argument(
        "-transit", "--transit", action="store_true", help="Public transit duration"
    )
    return parser


def _build_add_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f"{PROG} {CMD_ADD}",
        description="Save a location under an alias.",
        allow_abbrev=False,
    )
    parser.add_argument("-name", "--name", default="", help="Alias to save the location as")
    parser.add_argument(
        "-location", "--location", default="", help="Address or 'lat,lon' to save"
    )
    return parser


class ArgumentResolver:
    """Resolves command-line arguments into a single command.

    Unrecognized flags print a usage message and exit the process.
    """

    def __init__(
        self,
        store: "StorageProvider",
        line_reader: "LineReader",
        router_factory: RouterFactory,
    ) -> None:
        """Initialize with the collaborators commands are built with.

        Args:
            store: Storage for the configuration and saved locations.
            line_reader: Interactive input used when configuring.
            router_factory: Builds the mapping provider from the configuration.
        """
        self._store = store
        self._line_reader = line_reader
        self._router_factory = router_factory

    def resolve(self, configuration: Configuration | None, args: Sequence[str]) -> Command:
        """Pick and build the command for the given arguments.

        Without a stored configuration the only possible command is configure,
        whatever the arguments say.

        Raises:
            ProviderConstructionError: If the mapping provider cannot be created.
        """
        if configuration is None or not args:
            logger.debug("Resolved configure command")
            return self.parse_configure_command()

        if args[0] == CMD_ADD:
            return self.parse_add_command(args[1:])
        if args[0] == CMD_LIST:
            return self.parse_list_command()
        if args[0] == CMD_COMMUTE:
            return self.parse_commute_command(configuration, args[1:])
        return self.parse_commute_command(configuration, args)

    def parse_configure_command(self) -> ConfigureCommand:
        return ConfigureCommand(line_reader=self._line_reader, store=self._store)

    def parse_add_command(self, args: Sequence[str]) -> AddCommand:
        parsed = _build_add_parser().parse_args(list(args))
        return AddCommand(store=self._store, name=parsed.name, value=parsed.location)

    def parse_list_command(self) -> ListCommand:
        return ListCommand(store=self._store)

    def parse_commute_command(
        self, configuration: Configuration, args: Sequence[str]
    ) -> CommuteCommand:
        """Build a commute command, defaulting to driving when no mode is selected."""
        router = self._router_factory(configuration)
        parsed = _build_commute_parser().parse_args(list(args))

        command = CommuteCommand(
            durationer=router,
            locator=router,
            store=self._store,
            from_=DEFAULT_LOCATION_ALIAS if parsed.from_ is None else parsed.from_,
            to=DEFAULT_LOCATION_ALIAS if parsed.to is None else parsed.to,
            from_current=parsed.from_current,
            to_current=parsed.to_current,
            from_explicit=parsed.from_ is not None,
            to_explicit=parsed.to is not None,
            drive=parsed.drive,
            walk=parsed.walk,
            bike=parsed.bike,
            transit=parsed.transit,
        )
        if not (command.walk or command.bike or command.transit):
            command.drive = True
        return command
