"""Allow running the CLI with ``python -m commuter``."""

from commuter.main import cli_main

cli_main()
