"""
One-shot lookup: print definitions and details for a single word.
"""

import argparse

from rich.console import Console

from wordfinder.cli.client import open_provider
from wordfinder.core import render
from wordfinder.core.errors import ProviderConfigError, ProviderError
from wordfinder.core.normalize import normalize
from wordfinder.core.record import DetailCategory
from wordfinder.core.session import EXIT_CONFIG, EXIT_OK

EXIT_NOT_FOUND = 1
EXIT_PROVIDER = 1


def _category(value: str) -> DetailCategory:
    try:
        return DetailCategory.from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def add_subparser(subparsers):
    parser = subparsers.add_parser("lookup", help="Look up one word and exit")
    parser.add_argument("word", help="Word to look up")
    parser.add_argument(
        "-c", "--category",
        type=_category,
        help="Only show one category: synonyms, antonyms, similar-words, rhymes",
    )
    parser.add_argument("--json", action="store_true", help="Print the normalized record as JSON")
    parser.add_argument("--data", help="JSON word file to use instead of WordsAPI")
    parser.set_defaults(func=run_lookup)


def run_lookup(args) -> int:
    console = Console()
    word = args.word.strip()

    try:
        with open_provider(args.data) as provider:
            record = normalize(provider.fetch(word), text=word)
    except ProviderConfigError as e:
        render.error(console, str(e))
        return EXIT_CONFIG
    except ProviderError as e:
        render.error(console, f"Lookup failed: {e}")
        return EXIT_PROVIDER

    if args.json:
        console.print_json(data=record.to_dict())
        return EXIT_OK if record.found else EXIT_NOT_FOUND

    if not record.found:
        render.error(console, f"'{word}' was not found.")
        return EXIT_NOT_FOUND

    render.definitions(console, record)
    categories = [args.category] if args.category else list(DetailCategory)
    for category in categories:
        render.details(console, record, category)
    return EXIT_OK
