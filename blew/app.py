"""Entry point that runs the example game."""

import sys

from blew.application import Application
from blew.log import init_logger


def run() -> None:
    """Create the example application and run it until it is closed."""
    Application("Blew Example").start()


def main(argv=None) -> int:
    """Set up logging and run the example game."""
    init_logger()
    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())