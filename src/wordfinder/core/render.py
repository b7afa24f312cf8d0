# src/wordfinder/core/render.py
"""Console output for the interactive session and one-shot lookups."""

from enum import Enum
from typing import Iterable

from rich.console import Console
from rich.markup import escape

from wordfinder.core.record import DetailCategory, WordRecord


def greeting(console: Console) -> None:
    console.print("[bold]Welcome to wordfinder![/bold]")
    console.print("Look up a word, then browse its synonyms, antonyms, similar words and rhymes.")
    console.print()


def goodbye(console: Console) -> None:
    console.print("[bold]Goodbye![/bold]")


def error(console: Console, message: str) -> None:
    console.print(f"[red]✗ {escape(message)}[/red]")


def definitions(console: Console, record: WordRecord) -> None:
    console.print()
    if not record.definitions:
        console.print(f"No definitions listed for [bold]{escape(record.text)}[/bold].")
        return
    console.print(f"Definitions of [bold]{escape(record.text)}[/bold]:")
    for i, definition in enumerate(record.definitions, 1):
        console.print(f"{i}. {escape(definition)}")


def menu(console: Console, title: str, options: Iterable[Enum]) -> None:
    """Numbered menu from an Enum whose members carry .index and .label."""
    console.print()
    console.print(title)
    for option in options:
        console.print(f"  {option.index}. {option.label}")


def details(console: Console, record: WordRecord, category: DetailCategory) -> None:
    items = record.details(category)
    label = category.label.lower()
    word = escape(record.text)

    console.print()
    if not items:
        console.print(f"There are no listed {label} for [bold]{word}[/bold].")
        return
    console.print(f"{category.label} for [bold]{word}[/bold]:")
    for item in sorted(items):
        console.print(f"  • {escape(item)}")
