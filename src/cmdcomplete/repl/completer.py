# cmdcomplete.repl.completer - prompt_toolkit completer
"""
Exposes grammar completions through prompt_toolkit's Completer interface.
"""
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document
from typing import Iterable, Optional

from cmdcomplete.completion import CompletionContext, auto_complete
from cmdcomplete.grammar.nodes import Node
from cmdcomplete.grammar.tokenizer import quote_word


class GrammarCompleter(Completer):
    """
    Completer backed by a command grammar.

    Used for the completion menu shown while typing; Tab presses go through
    the completion session instead (see Repl).
    """

    def __init__(
        self,
        grammar: Node,
        unix_style: bool = True,
        context: Optional[CompletionContext] = None,
    ):
        """
        Initialize completer.

        Args:
            grammar: Grammar root
            unix_style: Quoting convention
            context: Listing collaborators
        """
        self.grammar = grammar
        self.unix_style = unix_style
        self.context = context

    def get_completions(
        self,
        document: Document,
        complete_event,
    ) -> Iterable[Completion]:
        """
        Get completions for current input.

        Args:
            document: Current document
            complete_event: Completion event

        Yields:
            Completion objects replacing the text of the cursor word before the cursor
        """
        state = auto_complete(
            document.text,
            document.cursor_position,
            self.grammar,
            self.unix_style,
            self.context,
        )
        start = state.word_pos[0] - document.cursor_position
        for candidate in state.completions:
            yield Completion(
                quote_word(candidate.text, self.unix_style),
                start_position=start,
                display=candidate.text,
            )
