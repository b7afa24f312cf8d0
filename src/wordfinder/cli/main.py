"""
wordfinder CLI.
"""

import argparse
import logging
import sys

from wordfinder.cli.commands import lookup, session

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordfinder", description="Look up words and browse related words")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    session.add_subparser(subparsers)
    lookup.add_subparser(subparsers)

    # bare `wordfinder` starts the interactive session
    parser.set_defaults(func=session.run_session, data=None)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
