# cmdcomplete.repl - REPL interface module
from cmdcomplete.repl.repl import Repl, TabHandler
from cmdcomplete.repl.completer import GrammarCompleter
from cmdcomplete.repl.commands import ShellCommandHandler, build_grammar

__all__ = [
    "Repl",
    "TabHandler",
    "GrammarCompleter",
    "ShellCommandHandler",
    "build_grammar",
]
