# cmdcomplete.completion.session - Completion session state machine
"""
State kept across repeated completion key presses.

A session starts inactive. The first press either substitutes the only
candidate, or (with several candidates) lists them under the Unix
convention or substitutes the first/last one under the Windows convention.
Later presses cycle through the candidates. Editing the line ends the
session; the caller discards it.
"""
import math
from dataclasses import dataclass, field

from cmdcomplete.grammar.state import Candidate
from cmdcomplete.grammar.tokenizer import quote_word, unquote

PATH_SEPARATORS = "/\\"


@dataclass
class CompletionState:
    """A completion session."""
    line: str = ""
    word_pos: tuple[int, int] = (0, 0)
    completions: list[Candidate] = field(default_factory=list)
    unix_style: bool = True

    last_applied_index: int = -1
    active: bool = False
    first_press_done: bool = False
    unix_list_count: int = 0

    cursor: int = 0
    listing: str = ""
    append_space: bool = True

    @property
    def texts(self) -> list[str]:
        return [c.text for c in self.completions]

    @property
    def word(self) -> str:
        """Current unquoted text of the cursor word."""
        start, end = self.word_pos
        return unquote(self.line[start:end], self.unix_style)[0]

    def replace_word(self, text: str, trailing_space: bool = False) -> None:
        """
        Put text in place of the cursor word, quoting it if needed.

        Args:
            text: Replacement
            trailing_space: Follow the word with a space and put the cursor after it
        """
        start, end = self.word_pos
        quoted = quote_word(text, self.unix_style)
        rest = self.line[end:]
        self.line = self.line[:start] + quoted + rest
        self.word_pos = (start, start + len(quoted))
        self.cursor = start + len(quoted)

        if trailing_space:
            if not rest[:1].isspace():
                self.line = self.line[:self.cursor] + " " + rest
            self.cursor += 1


def common_prefix(texts: list[str], case_insensitive: bool = True) -> str:
    """
    Longest common prefix of texts, in the first text's casing.

    Args:
        texts: Candidate texts
        case_insensitive: Let characters differing only in case match
    """
    if not texts:
        return ""
    first = texts[0]
    length = len(first)
    for other in texts[1:]:
        n = 0
        while n < min(length, len(other)) and _same(first[n], other[n], case_insensitive):
            n += 1
        length = n
    return first[:length]


def _same(a: str, b: str, case_insensitive: bool) -> bool:
    return a.lower() == b.lower() if case_insensitive else a == b


def format_columns(items: list[str], console_width: int) -> str:
    """
    Lay items out in columns, filled top to bottom like ls.

    Args:
        items: Texts to list
        console_width: Available width in characters

    Returns:
        Lines joined with newlines
    """
    if not items:
        return ""
    col_width = max(len(item) for item in items) + 2
    cols = max(1, console_width // col_width)
    rows = math.ceil(len(items) / cols)

    lines = []
    for row in range(rows):
        cells = [items[i] for i in range(row, len(items), rows)]
        lines.append("".join(cell.ljust(col_width) for cell in cells).rstrip())
    return "\n".join(lines)


def apply_completion(s: CompletionState, forwards: bool = True, console_width: int = 80) -> str:
    """
    Handle one completion key press.

    Args:
        s: The session, mutated in place
        forwards: Cycle forwards (Tab) rather than backwards (Shift+Tab)
        console_width: Width available for listing candidates

    Returns:
        Column listing of the candidates, or "" when the line was changed instead
    """
    s.listing = ""
    count = len(s.completions)
    if count == 0:
        s.first_press_done = True
        return ""

    if s.active:
        if s.last_applied_index < 0:
            s.last_applied_index = 0 if forwards else count - 1
        else:
            s.last_applied_index = (s.last_applied_index + (1 if forwards else -1)) % count
        s.replace_word(s.completions[s.last_applied_index].text)
        return ""

    s.first_press_done = True

    if count == 1:
        text = s.completions[0].text
        s.replace_word(text, trailing_space=s.append_space and not text.endswith(tuple(PATH_SEPARATORS)))
        return ""

    if s.unix_style:
        prefix = common_prefix(s.texts, all(c.case_insensitive for c in s.completions))
        if len(prefix) > len(s.word):
            s.replace_word(prefix)
        s.listing = format_columns(s.texts, console_width)
        s.unix_list_count = count
        s.active = True
        return s.listing

    s.last_applied_index = 0 if forwards else count - 1
    s.replace_word(s.completions[s.last_applied_index].text)
    s.active = True
    return ""
