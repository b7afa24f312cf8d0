"""
Interactive session command.
"""

from rich.console import Console

from wordfinder.cli.client import open_provider
from wordfinder.core import render
from wordfinder.core.errors import ProviderConfigError
from wordfinder.core.session import EXIT_CONFIG, SessionController


def add_subparser(subparsers):
    parser = subparsers.add_parser("session", help="Start an interactive lookup session (default)")
    parser.add_argument("--data", help="JSON word file to use instead of WordsAPI")
    parser.set_defaults(func=run_session)


def run_session(args) -> int:
    console = Console()
    try:
        with open_provider(args.data) as provider:
            return SessionController(provider, console=console).run()
    except ProviderConfigError as e:
        render.error(console, str(e))
        return EXIT_CONFIG
