"""Querying HTML documents with CSS selectors."""

from __future__ import annotations

from typing import Callable, Iterator, Optional, Sequence

from bs4 import BeautifulSoup, Tag


class Selection:
    """An ordered set of elements of a parsed document."""

    def __init__(self, nodes: Sequence[Tag] = ()) -> None:
        self._nodes: list[Tag] = list(nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator["Selection"]:
        return (Selection([node]) for node in self._nodes)

    def __repr__(self) -> str:
        return f"Selection({len(self._nodes)} nodes)"

    def text(self) -> str:
        """Combined text of all selected elements and their descendants."""
        return "".join(node.get_text() for node in self._nodes)

    def html(self) -> str:
        """Inner HTML of the first selected element, or '' if there is none."""
        if not self._nodes:
            return ""
        return "".join(str(child) for child in self._nodes[0].contents)

    def find(self, selector: str) -> "Selection":
        """Descendants of the selected elements that match ``selector``."""
        seen: set[int] = set()
        found: list[Tag] = []
        for node in self._nodes:
            for match in node.select(selector):
                if id(match) not in seen:
                    seen.add(id(match))
                    found.append(match)
        return Selection(found)

    def first(self) -> "Selection":
        """Selection of the first element only."""
        return Selection(self._nodes[:1])

    def last(self) -> "Selection":
        """Selection of the last element only."""
        return Selection(self._nodes[-1:])

    def each(self, callback: Callable[[int, "Selection"], object]) -> None:
        """Call ``callback(position, selection)`` for each element, counting from 1."""
        for position, node in enumerate(self._nodes, start=1):
            callback(position, Selection([node]))

    def attr(self, name: str) -> Optional[str]:
        """Value of an attribute of the first element, or None if absent."""
        if not self._nodes:
            return None
        value = self._nodes[0].get(name)
        if value is None:
            return None
        return value if isinstance(value, str) else " ".join(value)

    def eq(self, index: int) -> "Selection":
        """Selection of the element at ``index``; negative counts from the end."""
        if index < 0:
            index += len(self._nodes)
        if 0 <= index < len(self._nodes):
            return Selection([self._nodes[index]])
        return Selection()


class Document:
    """A parsed HTML document."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    def find(self, selector: str) -> Selection:
        """Elements of the document that match ``selector``."""
        return Selection(self._soup.select(selector))

    def text(self) -> str:
        """All text of the document."""
        return self._soup.get_text()


def parse(text: str) -> Document:
    """Parse HTML text into a document."""
    return Document(BeautifulSoup(text, "html.parser", multi_valued_attributes=None))