# cmdcomplete.grammar.state - Traversal state
"""
Per-call state carried through a grammar traversal.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

from cmdcomplete.errors import CursorError
from cmdcomplete.grammar.tokenizer import Word

if TYPE_CHECKING:
    from cmdcomplete.completion.context import CompletionContext


class Outcome(Enum):
    """
    Result of evaluating a node at the current word.

    ADVANCED and SKIPPED let a parent sequence carry on with its next
    element; AT_CURSOR and MISMATCH stop the current branch.
    """
    ADVANCED = "advanced"
    SKIPPED = "skipped"
    AT_CURSOR = "at_cursor"
    MISMATCH = "mismatch"

    @property
    def halted(self) -> bool:
        return self in (Outcome.AT_CURSOR, Outcome.MISMATCH)


@dataclass(frozen=True)
class Candidate:
    """A suggested replacement for the cursor word."""
    text: str
    case_insensitive: bool = False


@dataclass
class ACState:
    """
    Traversal state.

    The last entry of words is the cursor word; its text only holds the
    part before the cursor.
    """
    words: list[Word]
    i: int = 0
    unix_style: bool = True
    context: Optional["CompletionContext"] = None
    completions: list[Candidate] = field(default_factory=list)

    def __post_init__(self):
        if not self.words:
            raise CursorError("Traversal needs at least the cursor word")
        self.check_index()

    def check_index(self) -> None:
        """Fail fast if the index left [0, word count)."""
        if not 0 <= self.i < len(self.words):
            raise CursorError(f"Word index {self.i} outside [0, {len(self.words)})")

    @property
    def at_cursor(self) -> bool:
        return self.i == len(self.words) - 1

    @property
    def word(self) -> str:
        return self.words[self.i].text

    def advance(self) -> Outcome:
        """Consume the current word."""
        self.i += 1
        self.check_index()
        return Outcome.ADVANCED

    def matches_prefix(self, candidate: str) -> bool:
        """Check the cursor word is a case-insensitive prefix of candidate."""
        return candidate.lower().startswith(self.word.lower())

    def add_completion(self, text: str, case_insensitive: bool = False) -> None:
        """Add a candidate unless the same text was already found."""
        if any(c.text == text for c in self.completions):
            return
        self.completions.append(Candidate(text, case_insensitive))
