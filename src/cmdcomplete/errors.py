# cmdcomplete.errors - Exception types
"""
Exceptions raised for embedder contract violations.

A line with no matching completions is not an error; it produces an
empty candidate list.
"""


class CompletionError(Exception):
    """Base class for cmdcomplete errors."""


class CursorError(CompletionError, ValueError):
    """Insertion offset or traversal index outside the line."""
