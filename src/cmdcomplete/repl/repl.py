# cmdcomplete.repl.repl - Demo shell REPL
"""
Interactive shell whose Tab key is driven by the completion session.
"""
import logging
import shutil
from pathlib import Path
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.application import run_in_terminal
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document
from prompt_toolkit.history import FileHistory
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.styles import Style

from cmdcomplete.completion import CompletionContext, CompletionState, apply_completion, auto_complete
from cmdcomplete.config import Config
from cmdcomplete.fs.local import FileSystemListing
from cmdcomplete.fs.remote import MemoryFileSystem
from cmdcomplete.repl.commands import ShellCommandHandler
from cmdcomplete.repl.completer import GrammarCompleter
from cmdcomplete.version import __version__

logger = logging.getLogger(__name__)


class TabHandler:
    """
    Connects Tab presses on a buffer to a completion session.

    The session is kept while the buffer still shows the line and cursor
    it produced; any other edit starts a new one.
    """

    def __init__(self, grammar, context: CompletionContext, config: Config):
        self.grammar = grammar
        self.context = context
        self.config = config
        self.session: Optional[CompletionState] = None

    def console_width(self) -> int:
        if self.config.console_width > 0:
            return self.config.console_width
        return shutil.get_terminal_size().columns

    def press(self, text: str, cursor: int, forwards: bool = True) -> tuple[str, int, str]:
        """
        Handle one Tab press.

        Args:
            text: Current line
            cursor: Current cursor offset
            forwards: Tab rather than Shift+Tab

        Returns:
            Tuple of (new line, new cursor, listing to print)
        """
        s = self.session
        if s is None or s.line != text or s.cursor != cursor:
            s = auto_complete(text, cursor, self.grammar, self.config.unix_style, self.context)
            s.append_space = self.config.append_space
            self.session = s

        listing = apply_completion(s, forwards, self.console_width())
        return s.line, s.cursor, listing

    def apply(self, buffer: Buffer, forwards: bool) -> None:
        line, cursor, listing = self.press(buffer.text, buffer.cursor_position, forwards)
        buffer.document = Document(line, cursor)
        if listing:
            run_in_terminal(lambda: print(listing))


class Repl:
    """
    Interactive demo shell.

    Features:
    - Grammar-driven Tab completion and cycling
    - Command history
    - Usage text rendered from the grammar
    """

    # REPL prompt style
    STYLE = Style.from_dict({
        "prompt": "bold cyan",
        "rprompt": "gray",
    })

    def __init__(self, config: Optional[Config] = None, remote: Optional[MemoryFileSystem] = None):
        """
        Initialize REPL.

        Args:
            config: Configuration; defaults are used if omitted
            remote: Remote filesystem the shell operates on
        """
        self.config = config or Config()
        self.handler = ShellCommandHandler(remote, self.config.unix_style)
        self.context = CompletionContext(
            local=FileSystemListing(),
            remote=self.handler.remote.context(),
        )

        self.completer = GrammarCompleter(self.handler.grammar, self.config.unix_style, self.context)
        self.tab = TabHandler(self.handler.grammar, self.context, self.config)

        history_file = self.config.history_file
        if history_file is None:
            history_file = Path.home() / ".cmdcomplete_history"
        self.history = FileHistory(str(history_file))

        self.session: Optional[PromptSession] = None

    def _key_bindings(self) -> KeyBindings:
        bindings = KeyBindings()

        @bindings.add("tab")
        def _(event):
            self.tab.apply(event.current_buffer, forwards=True)

        @bindings.add("s-tab")
        def _(event):
            self.tab.apply(event.current_buffer, forwards=False)

        return bindings

    def _create_session(self) -> PromptSession:
        """Create prompt session."""
        return PromptSession(
            history=self.history,
            auto_suggest=AutoSuggestFromHistory(),
            completer=self.completer,
            complete_while_typing=self.config.complete_while_typing,
            key_bindings=self._key_bindings(),
            style=self.STYLE,
        )

    def run(self) -> None:
        """Run the REPL."""
        self.session = self._create_session()
        print(self._get_banner())

        while True:
            try:
                line = self.session.prompt(
                    [("class:prompt", self.config.prompt)],
                    rprompt=self._get_rprompt(),
                )
                if not line or not line.strip():
                    continue

                if self.execute_line(line.strip()):
                    break

            except KeyboardInterrupt:
                print("\nUse quit to exit")
                continue

            except EOFError:
                print("\nGoodbye!")
                break

    def execute_line(self, line: str) -> bool:
        """
        Execute a line of input.

        Args:
            line: Input line

        Returns:
            True if REPL should exit
        """
        logger.debug("Executing %r", line)
        output, should_exit = self.handler.execute(line)
        if output:
            print(output)
        return should_exit

    def _get_banner(self) -> str:
        """Get welcome banner."""
        return f"""
cmdcomplete v{__version__} - grammar completion demo shell
Press Tab to complete, type help for commands, quit to exit
"""

    def _get_rprompt(self) -> str:
        """Get right prompt (remote folder)."""
        return self.handler.remote.path_of(self.handler.remote.cwd)
