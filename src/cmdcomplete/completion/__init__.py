# cmdcomplete.completion - Completion engine and session
from cmdcomplete.completion.context import CompletionContext
from cmdcomplete.completion.engine import auto_complete
from cmdcomplete.completion.session import CompletionState, apply_completion

__all__ = [
    "CompletionContext",
    "CompletionState",
    "apply_completion",
    "auto_complete",
]
