# cmdcomplete.grammar.tokenizer - Quote-aware word splitting
"""
Splits a command line into words with their position spans.

Two quoting conventions are supported:
- Unix: single or double quotes delimit a word that may contain whitespace
- Windows: only double quotes delimit a word

An unterminated quote extends the word to the end of the line.
"""
from dataclasses import dataclass
from typing import Optional

from cmdcomplete.errors import CursorError

UNIX_QUOTES = "'\""
WINDOWS_QUOTES = '"'


def quote_chars(unix_style: bool) -> str:
    """Get the characters that open a quoted word."""
    return UNIX_QUOTES if unix_style else WINDOWS_QUOTES


@dataclass
class Word:
    """A word of the line, unquoted, with the span it occupies."""
    text: str
    start: int
    end: int
    quote: Optional[str] = None

    @property
    def span(self) -> tuple[int, int]:
        return self.start, self.end

    @property
    def is_quoted(self) -> bool:
        return self.quote is not None


def identify_next_word(line: str, start_pos: int, unix_style: bool = True) -> tuple[int, int]:
    """
    Find the span of the next word at or after start_pos.

    Args:
        line: The command line
        start_pos: Offset to start scanning from
        unix_style: Use the Unix quoting convention

    Returns:
        Tuple of (start, end). Both equal len(line) when only whitespace remains.
    """
    if start_pos < 0 or start_pos > len(line):
        raise CursorError(f"Start position {start_pos} outside line of length {len(line)}")

    start = start_pos
    while start < len(line) and line[start].isspace():
        start += 1
    if start == len(line):
        return start, start

    quote = line[start]
    if quote in quote_chars(unix_style):
        close = line.find(quote, start + 1)
        return start, len(line) if close == -1 else close + 1

    end = start
    while end < len(line) and not line[end].isspace():
        end += 1
    return start, end


def unquote(raw: str, unix_style: bool = True) -> tuple[str, Optional[str]]:
    """
    Strip the surrounding quotes of a raw word.

    Returns:
        Tuple of (text, quote_char). quote_char is None for a bare word.
    """
    if raw and raw[0] in quote_chars(unix_style):
        quote = raw[0]
        if len(raw) > 1 and raw[-1] == quote:
            return raw[1:-1], quote
        return raw[1:], quote
    return raw, None


def tokenize(line: str, unix_style: bool = True) -> list[Word]:
    """
    Split a whole line into words.

    Args:
        line: The command line
        unix_style: Use the Unix quoting convention

    Returns:
        List of Word, in line order
    """
    words = []
    pos = 0
    while pos < len(line):
        start, end = identify_next_word(line, pos, unix_style)
        if start == end:
            break
        text, quote = unquote(line[start:end], unix_style)
        words.append(Word(text, start, end, quote))
        pos = end
    return words


def quote_word(text: str, unix_style: bool = True) -> str:
    """
    Quote a word so that it tokenizes back to itself.

    Words without whitespace or leading quote characters are returned as-is.
    """
    needs_quotes = not text or any(c.isspace() for c in text) or text[0] in quote_chars(unix_style)
    if not needs_quotes:
        return text
    if unix_style and '"' in text:
        return f"'{text}'"
    return f'"{text}"'


def join_words(words: list[str], unix_style: bool = True) -> str:
    """Re-join unquoted words into a line using the given convention."""
    return " ".join(quote_word(w, unix_style) for w in words)
