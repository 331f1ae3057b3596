"""Custom exceptions for library catalog."""


class LibraryCatalogError(Exception):
    """Base exception for library catalog errors."""
    pass


class InvalidIndexError(LibraryCatalogError):
    """Raised when a catalog position is outside the current entries."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index {index} is out of range; catalog has {size} entries")


class InvalidSourceKindError(LibraryCatalogError):
    """Raised when a kind selector does not map to a source kind."""

    def __init__(self, selector: int):
        self.selector = selector
        super().__init__(f"Unknown source type selector: {selector}")


class InputError(LibraryCatalogError):
    """Raised when console input cannot be parsed."""
    pass


class ConfigurationError(LibraryCatalogError):
    """Raised when there's an error in configuration."""
    pass
