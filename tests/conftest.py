"""Shared fixtures for library catalog tests."""

import io

import pytest

from library_catalog.console_io import ConsoleIO, create_console
from library_catalog.domain.entities import Catalog, Source, SourceKind


@pytest.fixture
def make_io():
    """Factory building a ConsoleIO fed from a script, plus its output buffer."""
    def _make(script: str, **kwargs):
        out = io.StringIO()
        console_io = ConsoleIO(
            console=create_console(color=False, file=out),
            stdin=io.StringIO(script),
            **kwargs
        )
        return console_io, out
    return _make


@pytest.fixture
def sample_sources():
    """A mixed set of sources in deliberately unsorted order."""
    return [
        Source(SourceKind.NEWSPAPER, "Daily", year=2020),
        Source(SourceKind.BOOK, "Zebra", author="Ann", category="fiction"),
        Source(SourceKind.MAGAZINE, "Wired", year=2019),
        Source(SourceKind.BOOK, "Alpha", author="Bob", category="detective"),
        Source(SourceKind.NEWSPAPER, "Courier", year=2021),
        Source(SourceKind.MAGAZINE, "Byte", year=2020),
    ]


@pytest.fixture
def catalog(sample_sources):
    """A catalog filled with the sample sources."""
    result = Catalog()
    for source in sample_sources:
        result.add(source)
    return result
