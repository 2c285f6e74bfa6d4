"""Main entry point for the commuter command."""

import asyncio
import logging
import sys
from collections.abc import Sequence

import aiohttp

from commuter.adapters.api_request_logger import should_log_requests
from commuter.adapters.config import AppConfig
from commuter.adapters.console import ConsoleIndicator, StdinLineReader
from commuter.adapters.google_maps import GoogleMapsRouter
from commuter.adapters.storage import JsonFileStorage
from commuter.cli import ArgumentResolver
from commuter.domain.errors import CommuterError
from commuter.domain.models import Configuration

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure logging to stderr at the given level."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    if should_log_requests():
        logging.getLogger("commuter.adapters.api_request_logger").setLevel(logging.INFO)


async def main(argv: Sequence[str] | None = None) -> int:
    """Resolve, validate and run one command. Returns the process exit status."""
    try:
        config = AppConfig()
    except ValueError as e:
        configure_logging("WARNING")
        logger.error(f"Invalid settings: {e}")
        return 1

    configure_logging(config.log_level)
    args = list(sys.argv[1:] if argv is None else argv)
    store = JsonFileStorage(config.storage_dir)
    indicator = ConsoleIndicator()

    try:
        configuration = store.load(Configuration)
        async with aiohttp.ClientSession() as session:
            resolver = ArgumentResolver(
                store=store,
                line_reader=StdinLineReader(),
                router_factory=lambda conf: GoogleMapsRouter(
                    conf.api_key, session, timeout_seconds=config.request_timeout_seconds
                ),
            )
            command = resolver.resolve(configuration, args)
            command.validate()
            await command.run(indicator)
    except CommuterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
