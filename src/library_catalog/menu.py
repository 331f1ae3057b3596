"""Interactive menu over the library catalog."""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from .console_io import ConsoleIO
from .domain.entities import Catalog, DEFAULT_SEPARATOR, Source, SourceKind
from .domain.result import try_catch
from .exceptions import InputError, InvalidSourceKindError

logger = logging.getLogger(__name__)

EXIT_CHOICE = 0

MENU_ITEMS: List[Tuple[int, str]] = [
    (1, "Fill database"),
    (2, "View all sources"),
    (3, "Add source"),
    (4, "Delete source"),
    (5, "Sort sources"),
    (6, "Search book"),
    (7, "Search magazine by year"),
    (8, "Filter books by author"),
    (9, "Remove newspapers by year"),
    (EXIT_CHOICE, "Exit"),
]

KIND_PROMPT = "Choose type (1 - Book, 2 - Magazine, 3 - Newspaper): "
INVALID_KIND = "Invalid type. Choose 1, 2 or 3."


def render_menu() -> str:
    """Get the menu block shown before every choice."""
    lines = ["", "Menu:"]
    lines.extend(f"{number}. {label}" for number, label in MENU_ITEMS)
    return "\n".join(lines)


class CatalogShell:
    """Maps numbered menu choices to catalog operations."""

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        io: Optional[ConsoleIO] = None,
        separator: str = DEFAULT_SEPARATOR,
    ):
        self.catalog = catalog if catalog is not None else Catalog()
        self.io = io or ConsoleIO()
        self.separator = separator

        self._actions: Dict[int, Callable[[], None]] = {
            1: self.fill_database,
            2: self.view_all,
            3: self.add_source,
            4: self.delete_source,
            5: self.sort_sources,
            6: self.search_book,
            7: self.search_magazine_by_year,
            8: self.filter_books_by_author,
            9: self.remove_newspapers_by_year,
        }

    def run(self) -> int:
        """Run the menu loop until exit or end of input; return the exit status."""
        while True:
            self.io.write(render_menu())
            try:
                text = self.io.read_line("Your choice: ")
            except EOFError:
                logger.info("Input closed, leaving menu")
                return 0

            choice = try_catch(lambda: int(text.strip()), ValueError).or_else(None)
            if choice == EXIT_CHOICE:
                logger.info("Exit requested with %d entries in catalog", len(self.catalog))
                return 0

            action = self._actions.get(choice)
            if action is None:
                logger.warning("Invalid menu choice %r", text)
                self.io.error("Invalid choice.")
                continue

            try:
                action()
            except InputError as e:
                self.io.error(str(e))
            except EOFError:
                logger.info("Input closed during choice %d", choice)
                return 0

    def _show(self, source: Source) -> None:
        self.io.write_record(source.render(self.separator))

    def _log_contents(self) -> None:
        counts = self.catalog.count_by_kind()
        logger.debug(
            "Catalog holds %s",
            ", ".join(f"{n} {kind.label.lower()}" for kind, n in counts.items()),
        )

    def _read_kind(self) -> SourceKind:
        while True:
            selector = self.io.read_int(KIND_PROMPT)
            try:
                return SourceKind.from_selector(selector)
            except InvalidSourceKindError as e:
                logger.warning("%s", e)
                if not self.io.reprompt_on_invalid:
                    raise InputError(INVALID_KIND) from e
                self.io.error(INVALID_KIND)

    def fill_database(self) -> None:
        count = self.io.read_int("How many sources to add: ")
        for _ in range(count):
            self.add_source()

    def add_source(self) -> None:
        kind = self._read_kind()
        title = self.io.read_line("Enter title: ")

        if kind is SourceKind.BOOK:
            author = self.io.read_line("Enter author: ")
            category = self.io.read_line("Enter category (fiction, detective, etc.): ")
            source = Source(kind, title, author=author, category=category)
        else:
            year = self.io.read_int("Enter year: ")
            source = Source(kind, title, year=year)

        self.catalog.add(source)
        self.io.success("Source added to database.")
        self._log_contents()

    def view_all(self) -> None:
        if self.catalog.is_empty:
            self.io.warning("Database is empty.")
            return
        for source in self.catalog:
            self._show(source)

    def delete_source(self) -> None:
        index = self.io.read_int("Enter index to delete: ")
        self.catalog.delete_at(index).match(
            success=lambda _: self.io.success("Source deleted."),
            failure=lambda _: self.io.error("Invalid index."),
        )
        self._log_contents()

    def sort_sources(self) -> None:
        self.catalog.sort()
        self.io.success("Sources sorted.")

    def search_book(self) -> None:
        author = self.io.read_line("Enter author: ")
        title = self.io.read_line("Enter title: ")
        found = self.catalog.search_book(author, title)
        if found is None:
            self.io.warning("Book not found.")
        else:
            self._show(found)

    def search_magazine_by_year(self) -> None:
        year = self.io.read_int("Enter year: ")
        found = self.catalog.search_magazine_by_year(year)
        if found is None:
            self.io.warning("Magazine not found.")
        else:
            self._show(found)

    def filter_books_by_author(self) -> None:
        # No message when nothing matches
        author = self.io.read_line("Enter author: ")
        for source in self.catalog.filter_books_by_author(author):
            self._show(source)

    def remove_newspapers_by_year(self) -> None:
        year = self.io.read_int("Enter year: ")
        self.catalog.remove_newspapers_by_year(year)
        self.io.success(f"Newspapers from {year} year deleted.")
        self._log_contents()
