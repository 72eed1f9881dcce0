# cmdcomplete - Grammar-driven command line completion
"""
cmdcomplete computes Tab completions for interactive shells from a
declarative command grammar, and drives the key-press session that
applies them.
"""

from cmdcomplete.version import __version__
from cmdcomplete.completion import CompletionContext, CompletionState, apply_completion, auto_complete

__all__ = [
    "__version__",
    "CompletionContext",
    "CompletionState",
    "apply_completion",
    "auto_complete",
]
