"""Library Catalog

An interactive, in-memory catalog of books, magazines and newspapers.
"""

__version__ = "0.1.0"

from .domain import Catalog, Source, SourceKind, Result, Success, Failure
from .console_io import ConsoleIO
from .menu import CatalogShell
from .exceptions import (
    LibraryCatalogError,
    InvalidIndexError,
    InvalidSourceKindError,
    InputError,
    ConfigurationError,
)

__all__ = [
    # Domain
    "Catalog",
    "Source",
    "SourceKind",
    "Result",
    "Success",
    "Failure",

    # Console
    "ConsoleIO",
    "CatalogShell",

    # Errors
    "LibraryCatalogError",
    "InvalidIndexError",
    "InvalidSourceKindError",
    "InputError",
    "ConfigurationError",
]
