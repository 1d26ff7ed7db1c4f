"""Command line entry point."""

import argparse
import logging

from .errors import InvalidHostname
from .validators import validate_hostname

VERSION = "0.1.0"
MIN_PORT = 1024
MAX_PORT = 49151

logger = logging.getLogger(__name__)


def _hostname(value):
    try:
        return validate_hostname(value)
    except InvalidHostname as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _port(value):
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port number: {value}") from None
    if not MIN_PORT <= port <= MAX_PORT:
        raise argparse.ArgumentTypeError(
            f"{value} is not in {MIN_PORT}..={MAX_PORT}"
        )
    return port


def build_parser():
    """Build the argument parser for the command line."""
    parser = argparse.ArgumentParser(
        prog="CarnicusDB", description="Small, fast and scalable sql database"
    )
    parser.add_argument("--version", "-V", action="version", version=VERSION)
    commands = parser.add_subparsers(dest="command", required=True)
    run = commands.add_parser("run")
    run.add_argument("--version", "-V", action="version", version=VERSION)
    run.add_argument("-D", "--database-file-path", required=True)
    run.add_argument("-H", "--hostname", required=True, type=_hostname)
    run.add_argument("-P", "--port", required=True, type=_port)
    return parser


def main(argv=None):
    """Parse arguments and report the chosen settings."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    if args.command == "run":
        logger.info("File path: %s", args.database_file_path)
        logger.info("Hostname: %s", args.hostname)
        logger.info("Port: %s", args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())