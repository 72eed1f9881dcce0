# tests/conftest.py - Pytest configuration
"""
Pytest configuration and shared fixtures.
"""
import pytest

from cmdcomplete.completion import CompletionContext
from cmdcomplete.fs.remote import MemoryFileSystem


class MockListing:
    """Local listing returning fixed names and recording its calls."""

    def __init__(self, names, error=None):
        self.names = list(names)
        self.error = error
        self.calls = []

    def list(self, path_prefix, want_files, want_folders):
        self.calls.append((path_prefix, want_files, want_folders))
        if self.error is not None:
            raise self.error
        return self.names


@pytest.fixture
def mock_listing():
    """Return a listing with the entries foo.txt, foobar and bar."""
    return MockListing(["foo.txt", "foobar", "bar"])


@pytest.fixture
def remote_fs():
    """Return an in-memory filesystem with a few files and folders."""
    fs = MemoryFileSystem()
    fs.add("a.txt")
    fs.add("docs/readme.txt")
    fs.add("docs/notes.txt")
    fs.add("music", is_folder=True)
    fs.add("my docs", is_folder=True)
    return fs


@pytest.fixture
def remote_context(remote_fs):
    """Return a completion context over the in-memory filesystem."""
    return CompletionContext(local=MockListing([]), remote=remote_fs.context())
