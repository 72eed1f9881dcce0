# cmdcomplete.grammar.nodes - Grammar node model
"""
Grammar nodes and the recursive completion matcher.

Each node is evaluated against an ACState at the word index state.i and
classifies itself as one of:
- at the cursor: add candidates that prefix-match the partial word, halt
- matching a word before the cursor: consume it and continue
- not matching: halt without consuming

Nodes hold no per-call state, so the same sub-grammar can be linked from
any number of parents.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from cmdcomplete.fs.local import FileSystemListing
from cmdcomplete.grammar.state import ACState, Outcome

logger = logging.getLogger(__name__)

FLAG_MARKER = "-"


class Node(ABC):
    """Base class for grammar nodes."""

    @abstractmethod
    def add_completions(self, state: ACState) -> Outcome:
        """
        Evaluate this node at state.i.

        Args:
            state: Traversal state; i is advanced past consumed words

        Returns:
            Outcome of the evaluation
        """

    @abstractmethod
    def describe(self) -> str:
        """Render the node for usage text."""

    def __str__(self) -> str:
        return self.describe()


@dataclass(eq=False)
class Sequence(Node):
    """current followed by next."""
    current: Node
    next: Node

    def add_completions(self, state: ACState) -> Outcome:
        outcome = self.current.add_completions(state)
        if outcome.halted:
            return outcome
        return self.next.add_completions(state)

    def describe(self) -> str:
        return f"{self.current.describe()} {self.next.describe()}"


@dataclass(eq=False)
class Either(Node):
    """
    Choice among alternatives.

    All alternatives are explored from the same word so that every
    alternative reachable at the cursor contributes candidates.
    """
    eithers: list[Node] = field(default_factory=list)
    describe_prefix: str = ""

    def add(self, node: Node) -> None:
        """Add an alternative."""
        self.eithers.append(node)

    def add_completions(self, state: ACState) -> Outcome:
        start = state.i
        furthest: int | None = None
        skipped = False
        reached_cursor = False

        for node in self.eithers:
            state.i = start
            outcome = node.add_completions(state)
            if outcome is Outcome.ADVANCED:
                furthest = state.i if furthest is None else max(furthest, state.i)
            elif outcome is Outcome.SKIPPED:
                skipped = True
            elif outcome is Outcome.AT_CURSOR:
                reached_cursor = True

        if furthest is not None:
            state.i = furthest
            return Outcome.ADVANCED
        state.i = start
        if skipped:
            return Outcome.SKIPPED
        return Outcome.AT_CURSOR if reached_cursor else Outcome.MISMATCH

    def describe(self) -> str:
        if self.describe_prefix:
            return "\n".join(self.describe_prefix + n.describe() for n in self.eithers)
        if len(self.eithers) == 1:
            return self.eithers[0].describe()
        return "(" + "|".join(n.describe() for n in self.eithers) + ")"


@dataclass(eq=False)
class Optional(Node):
    """Zero or one occurrence of subnode."""
    subnode: Node

    def add_completions(self, state: ACState) -> Outcome:
        start = state.i
        began_at_cursor = state.at_cursor
        outcome = self.subnode.add_completions(state)
        if outcome is Outcome.MISMATCH or (outcome is Outcome.AT_CURSOR and began_at_cursor):
            # at the cursor the element is offered and may also be left out
            state.i = start
            return Outcome.SKIPPED
        return outcome

    def describe(self) -> str:
        return f"[{self.subnode.describe()}]"


@dataclass(eq=False)
class Repeat(Node):
    """Zero or more occurrences of subnode."""
    subnode: Node

    def add_completions(self, state: ACState) -> Outcome:
        start = state.i
        while True:
            before = state.i
            began_at_cursor = state.at_cursor
            outcome = self.subnode.add_completions(state)
            if outcome is Outcome.AT_CURSOR:
                if not began_at_cursor:
                    return outcome
                state.i = before
                break
            if outcome is Outcome.MISMATCH:
                state.i = before
                break
            if state.i == before:
                # subnode can match without consuming; stop instead of looping
                break

        return Outcome.ADVANCED if state.i > start else Outcome.SKIPPED

    def describe(self) -> str:
        return f"{self.subnode.describe()}*"


@dataclass(eq=False)
class Text(Node):
    """A literal keyword, or a named placeholder when param is set."""
    exact_text: str
    param: bool = False

    def add_completions(self, state: ACState) -> Outcome:
        if state.at_cursor:
            candidate = self.describe()
            if state.matches_prefix(candidate):
                state.add_completion(candidate, case_insensitive=True)
            return Outcome.AT_CURSOR

        if self.param or state.word.lower() == self.exact_text.lower():
            return state.advance()
        return Outcome.MISMATCH

    def describe(self) -> str:
        return f"<{self.exact_text}>" if self.param else self.exact_text


@dataclass(eq=False)
class Flag(Node):
    """A flag such as -R; only considered for words starting with the flag marker."""
    flag_text: str

    def add_completions(self, state: ACState) -> Outcome:
        word = state.word
        if state.at_cursor:
            if (not word or word.startswith(FLAG_MARKER)) and state.matches_prefix(self.flag_text):
                state.add_completion(self.flag_text)
            return Outcome.AT_CURSOR

        if word.startswith(FLAG_MARKER) and word.lower() == self.flag_text.lower():
            return state.advance()
        return Outcome.MISMATCH

    def describe(self) -> str:
        return self.flag_text


@dataclass(eq=False)
class WholeNumber(Node):
    """A non-negative integer, suggested as its default at the cursor."""
    default_value: int = 0

    def add_completions(self, state: ACState) -> Outcome:
        if state.at_cursor:
            candidate = str(self.default_value)
            if state.matches_prefix(candidate):
                state.add_completion(candidate)
            return Outcome.AT_CURSOR

        word = state.word
        if word.isascii() and word.isdigit():
            return state.advance()
        return Outcome.MISMATCH

    def describe(self) -> str:
        return f"<{self.default_value}>"


def split_path(partial: str, unix_style: bool) -> tuple[str, str]:
    """
    Split a partial path at its last separator.

    Returns:
        Tuple of (directory part including the separator, leaf)
    """
    separators = "/" if unix_style else "/\\"
    cut = max(partial.rfind(sep) for sep in separators) + 1
    return partial[:cut], partial[cut:]


@dataclass(eq=False)
class PathNode(Node):
    """
    Common behaviour of filesystem path parameters.

    Away from the cursor any word is accepted; paths are not checked so
    that no I/O happens except for the cursor word.
    """
    report_files: bool = True
    report_folders: bool = True
    desc_pref: str = ""

    KIND = "path"

    def add_completions(self, state: ACState) -> Outcome:
        if not state.at_cursor:
            return state.advance()

        folder, _ = split_path(state.word, state.unix_style)
        try:
            names = self.list_entries(state, folder)
        except Exception as e:
            logger.debug("Listing for %r failed: %s", state.word, e)
            return Outcome.AT_CURSOR

        case_insensitive = self.case_insensitive(state)
        for name in names:
            candidate = folder + name
            if state.matches_prefix(candidate):
                state.add_completion(candidate, case_insensitive)
        return Outcome.AT_CURSOR

    @abstractmethod
    def list_entries(self, state: ACState, folder: str) -> list[str]:
        """List entry names in folder for the cursor word."""

    def case_insensitive(self, state: ACState) -> bool:
        return False

    def _kind(self) -> str:
        if self.report_files and not self.report_folders:
            return "file"
        if self.report_folders and not self.report_files:
            return "folder"
        return "path"

    def describe(self) -> str:
        return f"{self.desc_pref}{self.KIND}{self._kind()}"


@dataclass(eq=False)
class LocalPath(PathNode):
    """
    A path on the local filesystem.

    Under the Windows convention the listing receives the partial path with
    forward slashes, so it splits folders the same way as the candidates.
    """

    KIND = "local"

    def list_entries(self, state: ACState, folder: str) -> list[str]:
        listing = state.context.local if state.context else None
        if listing is None:
            listing = FileSystemListing()
        path_prefix = state.word if state.unix_style else state.word.replace("\\", "/")
        return list(listing.list(path_prefix, self.report_files, self.report_folders))

    def case_insensitive(self, state: ACState) -> bool:
        return not state.unix_style


@dataclass(eq=False)
class RemotePath(PathNode):
    """
    A path on the remote filesystem.

    The remote session and its current directory come from the request's
    context and are read at every traversal, never stored on the node.
    """

    KIND = "remote"

    def list_entries(self, state: ACState, folder: str) -> list[str]:
        remote = state.context.remote if state.context else None
        if remote is None:
            return []

        handle = remote.cwd()
        if not remote.client.is_valid(handle):
            logger.debug("Remote current directory %r is not valid", handle)
            return []
        if folder:
            handle = remote.client.resolve(handle, folder)
            if handle is None:
                return []
        return list(remote.client.list(handle, self.report_files, self.report_folders))
