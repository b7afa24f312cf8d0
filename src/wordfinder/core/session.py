# src/wordfinder/core/session.py
"""
Interactive session state machine.

    WELCOME → PROMPT_WORD → EVALUATE_LOOKUP ─┬─ not found ──→ PROMPT_WORD
                                             └─ found → SHOW_DEFINITIONS
    SHOW_DEFINITIONS → PROMPT_CATEGORY → SHOW_DETAILS → PROMPT_NEXT_ACTION
    PROMPT_NEXT_ACTION: 1 → PROMPT_CATEGORY, 2 → PROMPT_WORD, 3 → TERMINATED

Each state handler returns the next state. Invalid input keeps the
current state, so re-prompting is a loop iteration, not recursion.
"""

import logging
from enum import Enum, auto
from typing import Callable, Sequence

from rich.console import Console

from wordfinder.core import render
from wordfinder.core.errors import ProviderConfigError, ProviderError
from wordfinder.core.normalize import normalize
from wordfinder.core.provider import LookupProvider
from wordfinder.core.record import DetailCategory, NextAction, WordRecord

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG = 2


class State(Enum):
    WELCOME = auto()
    PROMPT_WORD = auto()
    EVALUATE_LOOKUP = auto()
    SHOW_DEFINITIONS = auto()
    PROMPT_CATEGORY = auto()
    SHOW_DETAILS = auto()
    PROMPT_NEXT_ACTION = auto()
    TERMINATED = auto()


def parse_choice(text: str | None) -> int:
    """Menu input as an int; anything non-numeric becomes 0, which is never valid."""
    try:
        return int((text or "").strip())
    except ValueError:
        return 0


def valid_choice(choice: int, options: Sequence) -> bool:
    return 1 <= choice <= len(options)


class SessionController:
    def __init__(
        self,
        provider: LookupProvider,
        console: Console | None = None,
        read: Callable[[str], str] | None = None,
    ):
        self.provider = provider
        self.console = console or Console()
        self.read = read or self.console.input

        self.current: WordRecord | None = None
        self.category: DetailCategory | None = None
        self.exit_code = EXIT_OK

        self._handlers = {
            State.WELCOME: self._welcome,
            State.PROMPT_WORD: self._prompt_word,
            State.EVALUATE_LOOKUP: self._evaluate_lookup,
            State.SHOW_DEFINITIONS: self._show_definitions,
            State.PROMPT_CATEGORY: self._prompt_category,
            State.SHOW_DETAILS: self._show_details,
            State.PROMPT_NEXT_ACTION: self._prompt_next_action,
        }

    def run(self) -> int:
        """Run until the user exits. Returns the process exit code."""
        state = State.WELCOME
        while state is not State.TERMINATED:
            try:
                state = self._handlers[state]()
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                render.goodbye(self.console)
                state = State.TERMINATED
            logger.debug("state -> %s", state.name)
        return self.exit_code

    # === States ===

    def _welcome(self) -> State:
        render.greeting(self.console)
        return State.PROMPT_WORD

    def _prompt_word(self) -> State:
        self.current = None
        self.category = None
        word = self.read("Enter a word: ").strip()

        try:
            raw = self.provider.fetch(word)
            self.current = normalize(raw, text=word)
        except ProviderConfigError as e:
            logger.error("provider configuration error: %s", e)
            render.error(self.console, f"Cannot reach the word service: {e}")
            self.exit_code = EXIT_CONFIG
            return State.TERMINATED
        except ProviderError as e:
            logger.warning("lookup of %r failed: %s", word, e)
            render.error(self.console, f"Lookup failed: {e}. Please try again.")
            return State.PROMPT_WORD

        return State.EVALUATE_LOOKUP

    def _evaluate_lookup(self) -> State:
        if not self.current.found:
            render.error(self.console, f"Sorry, '{self.current.text}' was not found. Please try another word.")
            self.current = None
            return State.PROMPT_WORD
        return State.SHOW_DEFINITIONS

    def _show_definitions(self) -> State:
        render.definitions(self.console, self.current)
        return State.PROMPT_CATEGORY

    def _prompt_category(self) -> State:
        categories = list(DetailCategory)
        render.menu(self.console, "What would you like to see?", categories)
        choice = parse_choice(self.read(f"Enter a number (1-{len(categories)}): "))

        if not valid_choice(choice, categories):
            render.error(self.console, f"Invalid choice. Please enter a number between 1 and {len(categories)}.")
            return State.PROMPT_CATEGORY

        self.category = DetailCategory.from_index(choice)
        return State.SHOW_DETAILS

    def _show_details(self) -> State:
        render.details(self.console, self.current, self.category)
        return State.PROMPT_NEXT_ACTION

    def _prompt_next_action(self) -> State:
        actions = list(NextAction)
        render.menu(self.console, "What next?", actions)
        choice = parse_choice(self.read(f"Enter a number (1-{len(actions)}): "))

        if not valid_choice(choice, actions):
            render.error(self.console, f"Invalid choice. Please enter a number between 1 and {len(actions)}.")
            return State.PROMPT_NEXT_ACTION

        action = NextAction.from_index(choice)
        if action is NextAction.MORE_DETAILS:
            return State.PROMPT_CATEGORY
        if action is NextAction.NEW_WORD:
            self.current = None
            self.category = None
            return State.PROMPT_WORD

        render.goodbye(self.console)
        return State.TERMINATED
