"""
Catalog domain - sources and the collection that owns them.

This package is free of console I/O:
- Source records and their kinds
- The Catalog and its query/sort/removal operations
- Result values for recoverable failures
"""

from .entities import Catalog, Source, SourceKind, DEFAULT_SEPARATOR
from .result import Result, Success, Failure, try_catch

__all__ = [
    # Entities
    "Catalog",
    "Source",
    "SourceKind",
    "DEFAULT_SEPARATOR",
    # Results
    "Result",
    "Success",
    "Failure",
    "try_catch",
]
