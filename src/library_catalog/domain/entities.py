"""Catalog Entities.

This module defines the core entities of the library catalog: the
``Source`` record describing one book, magazine or newspaper, and the
``Catalog`` that owns an ordered collection of them.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from .result import Failure, Result, Success
from ..exceptions import InvalidIndexError, InvalidSourceKindError

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "-" * 25


class SourceKind(Enum):
    """Kinds of library sources, in catalog sort order."""
    BOOK = "book"
    MAGAZINE = "magazine"
    NEWSPAPER = "newspaper"

    @property
    def label(self) -> str:
        """Get the display name."""
        return self.value.capitalize()

    @property
    def rank(self) -> int:
        """Position of this kind in declaration order."""
        return list(SourceKind).index(self)

    @classmethod
    def from_selector(cls, selector: int) -> "SourceKind":
        """Map a 1-based menu selector to a kind.

        Raises:
            InvalidSourceKindError: If the selector is not 1, 2 or 3.
        """
        kinds = list(cls)
        if 1 <= selector <= len(kinds):
            return kinds[selector - 1]
        raise InvalidSourceKindError(selector)


@dataclass(frozen=True, slots=True)
class Source:
    """
    A single catalog record.

    Only the fields relevant to ``kind`` carry meaning: ``author`` and
    ``category`` for books, ``year`` for magazines and newspapers. The
    others keep their defaults and are ignored by display and search.
    """

    kind: SourceKind
    title: str
    author: str = ""
    category: str = ""
    year: int = 0

    @property
    def is_book(self) -> bool:
        return self.kind is SourceKind.BOOK

    def render(self, separator: str = DEFAULT_SEPARATOR) -> str:
        """Get the human-readable block for this source."""
        lines = [
            f"Type: {self.kind.label}",
            f"Title: {self.title}",
        ]
        if self.is_book:
            lines.append(f"Author: {self.author}")
            lines.append(f"Category: {self.category}")
        else:
            lines.append(f"Year: {self.year}")
        lines.append(separator)
        return "\n".join(lines)

    def sort_key(self) -> Tuple[int, str]:
        """Key ordering sources by kind, then title."""
        return (self.kind.rank, self.title)


@dataclass
class Catalog:
    """
    The in-memory library catalog.

    Entries keep insertion order until an explicit sort or removal
    reorders them. The catalog owns its list; callers only ever see
    snapshots.
    """

    _entries: List[Source] = field(default_factory=list, init=False, repr=False)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Source]:
        return iter(tuple(self._entries))

    @property
    def entries(self) -> Tuple[Source, ...]:
        """Snapshot of the entries in current order."""
        return tuple(self._entries)

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def add(self, source: Source) -> None:
        """Append a source to the catalog."""
        self._entries.append(source)
        logger.debug("Added %s %r (%d entries)", source.kind.label, source.title, len(self._entries))

    def delete_at(self, index: int) -> Result[Source, InvalidIndexError]:
        """Remove the entry at a 0-based position.

        Returns:
            Success with the removed source, or Failure with an
            InvalidIndexError when the position is out of range. A
            failure leaves the catalog untouched.
        """
        if index < 0 or index >= len(self._entries):
            logger.warning("Rejected delete at index %d (size %d)", index, len(self._entries))
            return Failure(InvalidIndexError(index, len(self._entries)))

        removed = self._entries.pop(index)
        logger.debug("Deleted %r at index %d", removed.title, index)
        return Success(removed)

    def sort(self) -> None:
        """Order entries by kind (Book, Magazine, Newspaper), then by title."""
        self._entries.sort(key=Source.sort_key)
        logger.debug("Sorted %d entries", len(self._entries))

    def search_book(self, author: str, title: str) -> Optional[Source]:
        """Find the first book with exactly this author and title."""
        for source in self._entries:
            if source.is_book and source.author == author and source.title == title:
                return source
        return None

    def search_magazine_by_year(self, year: int) -> Optional[Source]:
        """Find the first magazine published in ``year``."""
        for source in self._entries:
            if source.kind is SourceKind.MAGAZINE and source.year == year:
                return source
        return None

    def filter_books_by_author(self, author: str) -> List[Source]:
        """Get every book by ``author`` in current order."""
        return [s for s in self._entries if s.is_book and s.author == author]

    def remove_newspapers_by_year(self, year: int) -> int:
        """Remove every newspaper from ``year`` and return how many went."""
        kept = [
            s for s in self._entries
            if not (s.kind is SourceKind.NEWSPAPER and s.year == year)
        ]
        removed = len(self._entries) - len(kept)
        self._entries = kept
        logger.debug("Removed %d newspapers from %d", removed, year)
        return removed

    def count_by_kind(self) -> Dict[SourceKind, int]:
        """Get the number of entries of each kind."""
        counts = {kind: 0 for kind in SourceKind}
        for source in self._entries:
            counts[source.kind] += 1
        return counts
