"""Paged, fuzzy-searchable selection list for the terminal."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Callable, Container, NamedTuple, Optional, Sequence

from blessed import Terminal

logger = logging.getLogger(__name__)

_GREEN = "\x1b[92m"
_RESET = "\x1b[0m"

_SEQUENCE_KEYS = {
    "KEY_UP": "up",
    "KEY_DOWN": "down",
    "KEY_LEFT": "left",
    "KEY_RIGHT": "right",
    "KEY_ENTER": "enter",
    "KEY_BACKSPACE": "backspace",
    "KEY_DELETE": "backspace",
}


def _green(text: str) -> str:
    return f"{_GREEN}{text}{_RESET}"


@dataclass
class KV:
    """An option: ``key`` identifies it, ``value`` is what is shown."""

    key: str
    value: str


class Rank(NamedTuple):
    """A fuzzy match of ``source`` in ``target``."""

    source: str
    target: str
    distance: int
    original_index: int


def _matches(source: str, target: str) -> bool:
    remaining = iter(target.casefold())
    return all(ch in remaining for ch in source.casefold())


def _levenshtein(a: str, b: str) -> int:
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            current.append(
                min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + (ca != cb))
            )
        previous = current
    return previous[-1]


def rank_find_fold(source: str, targets: Sequence[str]) -> list[Rank]:
    """Targets containing the characters of ``source`` in order, ignoring case."""
    return [
        Rank(source, target, _levenshtein(source, target), index)
        for index, target in enumerate(targets)
        if _matches(source, target)
    ]


def _default_source(page: int, size: int, options: list[KV]) -> list[KV]:
    start = page * size
    return options[start : start + size]


@dataclass
class PageKVSelect:
    """An interactive list that pages through options and filters them by typing.

    Keys given to :meth:`handle_key` are ``"up"``, ``"down"``, ``"left"``,
    ``"right"``, ``"enter"``, ``"backspace"``, ``"ctrl+c"`` or a single
    typed character.
    """

    options: list[KV] = field(default_factory=list)
    size: int = 10
    filterable: bool = False
    top_text: str = ""
    highlight_options: Container[str] = field(default_factory=set)
    disabled_options: Container[str] = field(default_factory=set)
    source_func: Optional[Callable[[int, int, list[KV]], list[KV]]] = None
    index: int = field(default=0, init=False)
    page: int = field(default=0, init=False)
    result: Optional[KV] = field(default=None, init=False)
    search_text: str = field(default="", init=False)
    search_options: list[KV] = field(default_factory=list, init=False)
    page_options: list[KV] = field(default_factory=list, init=False)
    is_empty: bool = field(default=False, init=False)

    def change_index(self, delta: int) -> None:
        """Move the cursor, wrapping around at either end of the page."""
        self.index += delta
        if self.index < 0:
            self.index = len(self.page_options) - 1
        if self.index > len(self.page_options) - 1:
            self.index = 0

    def render(self) -> str:
        """Text of the list as it is currently shown."""
        if self.filterable:
            content = f"{self.top_text} {_green('[type to search]')}: {self.search_text}\n"
        else:
            content = f"{self.top_text}:\n"
        if not self.page_options and self.search_options:
            return "No data\n"
        if self.page_options:
            self.result = self.page_options[self.index]
        for i, option in enumerate(self.page_options):
            value = option.value
            if option.key in self.highlight_options:
                value = _green(value)
            if i == self.index:
                content += f"{_green('-> ')} {value}\n"
            else:
                content += f"   {value}\n"
        content += (
            "Press ↑/↓ to select and press ←/→ to page, and press Enter to confirm\n"
        )
        return content

    def search(self) -> None:
        """Recompute the options matching the search text, best matches first."""
        by_value = {kv.value: kv for kv in self.options}
        values = [kv.value for kv in self.options]
        ranks = rank_find_fold(self.search_text, values)
        if self.search_text:
            ranks.sort(key=lambda r: (r.source not in r.target, r.distance))
        self.search_options = [by_value[r.target] for r in ranks]

    def load_page_data(self, page: int) -> None:
        """Load the options of the given page of the search result."""
        source = self.source_func or _default_source
        options = source(page, self.size, self.search_options)
        self.index = 0
        if options:
            self.page_options = list(options)
        if not self.search_options:
            self.page_options = []
        self.is_empty = (page + 1) * self.size >= len(self.search_options)

    def _restart_search(self) -> None:
        self.index = 0
        self.page = 0
        self.search()
        self.load_page_data(self.page)

    def handle_key(self, key: str) -> bool:
        """React to one key press; return True when the selection is finished."""
        if key == "ctrl+c":
            self.result = None
            logger.info("Ctrl+C pressed, program stopped.")
            return True
        if key == "backspace":
            self.search_text = self.search_text[:-1]
            self._restart_search()
        elif key == "down":
            self.change_index(1)
        elif key == "up":
            self.change_index(-1)
        elif key == "left":
            if self.page > 0:
                self.page -= 1
                self.load_page_data(self.page)
        elif key == "right":
            if not self.is_empty:
                self.page += 1
                self.load_page_data(self.page)
        elif key == "enter":
            if self.index < len(self.page_options):
                self.result = self.page_options[self.index]
                if self.result is not None and self.result.key in self.disabled_options:
                    return False
            else:
                self.result = None
                logger.info("No search, program stopped.")
            return True
        elif len(key) == 1:
            if self.filterable:
                self.search_text += key
                self._restart_search()
        return False

    def show(self) -> Optional[KV]:
        """Run the list interactively; return the chosen option or None."""
        term = Terminal()
        out = sys.stdout
        self.search()
        self.page = 0
        self.load_page_data(self.page)
        drawn_lines = 0

        def draw() -> None:
            nonlocal drawn_lines
            text = self.render()
            prefix = term.move_up(drawn_lines) if drawn_lines else ""
            out.write(prefix + "\r" + term.clear_eos + text.replace("\n", "\r\n"))
            out.flush()
            drawn_lines = text.count("\n")

        with term.raw(), term.hidden_cursor():
            draw()
            while True:
                key = _translate(term.inkey())
                if key is None:
                    continue
                if self.handle_key(key):
                    break
                draw()
        out.write("\n")
        out.flush()
        return self.result


def _translate(keystroke) -> Optional[str]:
    if keystroke.is_sequence:
        return _SEQUENCE_KEYS.get(keystroke.name)
    text = str(keystroke)
    if text == "\x03":
        return "ctrl+c"
    if text in ("\r", "\n"):
        return "enter"
    if text in ("\x7f", "\x08"):
        return "backspace"
    if len(text) == 1 and text.isprintable():
        return text
    return None