# cmdcomplete.completion.engine - Completion entry point
"""
Turns a line and cursor offset into a completion session.
"""
import logging
from typing import Optional

from cmdcomplete.completion.context import CompletionContext
from cmdcomplete.completion.session import CompletionState
from cmdcomplete.errors import CursorError
from cmdcomplete.grammar.nodes import Node
from cmdcomplete.grammar.state import ACState
from cmdcomplete.grammar.tokenizer import Word, tokenize, unquote

logger = logging.getLogger(__name__)


def locate_cursor_word(
    line: str,
    insert_pos: int,
    unix_style: bool = True,
) -> tuple[list[Word], Word, tuple[int, int]]:
    """
    Split the line up to the cursor.

    Args:
        line: The command line
        insert_pos: Cursor offset
        unix_style: Use the Unix quoting convention

    Returns:
        Tuple of (words before the cursor word, cursor word holding the
        text before the cursor, span of the whole cursor word). A cursor in
        whitespace yields an empty word at insert_pos.
    """
    if insert_pos < 0 or insert_pos > len(line):
        raise CursorError(f"Cursor {insert_pos} outside line of length {len(line)}")

    preceding = []
    for word in tokenize(line, unix_style):
        if word.start < insert_pos <= word.end:
            partial, quote = unquote(line[word.start:insert_pos], unix_style)
            return preceding, Word(partial, word.start, insert_pos, quote), word.span
        if word.start >= insert_pos:
            break
        preceding.append(word)

    return preceding, Word("", insert_pos, insert_pos), (insert_pos, insert_pos)


def auto_complete(
    line: str,
    insert_pos: int,
    syntax: Node,
    unix_style: bool = True,
    context: Optional[CompletionContext] = None,
) -> CompletionState:
    """
    Gather the completions for the word under the cursor.

    Args:
        line: The command line
        insert_pos: Cursor offset
        syntax: Grammar root
        unix_style: Use the Unix quoting convention
        context: Listing collaborators; defaults to the local filesystem only

    Returns:
        An inactive CompletionState holding the candidates
    """
    preceding, cursor_word, word_pos = locate_cursor_word(line, insert_pos, unix_style)

    state = ACState(
        words=preceding + [cursor_word],
        unix_style=unix_style,
        context=context if context is not None else CompletionContext(),
    )
    syntax.add_completions(state)

    logger.debug(
        "%d completion(s) for word %d %r",
        len(state.completions), len(preceding), cursor_word.text,
    )
    return CompletionState(
        line=line,
        word_pos=word_pos,
        completions=state.completions,
        unix_style=unix_style,
        cursor=insert_pos,
    )
