# cmdcomplete.repl.commands - Demo shell commands
"""
Commands of the demo shell and the grammar describing them.

Remote commands act on an in-memory filesystem; local commands act on the
real working directory.
"""
import os
from pathlib import Path
from typing import Callable, Optional

from cmdcomplete.fs.remote import MemoryFileSystem
from cmdcomplete.grammar import (
    Either,
    either,
    flag,
    local_fs_file,
    local_fs_folder,
    opt,
    param,
    remote_fs_file,
    remote_fs_folder,
    remote_fs_path,
    repeat,
    sequence,
    text,
    tokenize,
    wholenumber,
)

COMMANDS = ["ls", "cd", "mkdir", "rm", "tree", "get", "put", "lcd", "pwd", "echo", "help", "quit"]


def build_grammar() -> Either:
    """
    Build the grammar of all shell commands.

    The top-level node carries a describe prefix so that its description
    lists one command per line.
    """
    folder = remote_fs_folder()
    grammar = either(describe_prefix="  ")
    grammar.add(sequence(text("ls"), opt(flag("-R")), opt(folder)))
    grammar.add(sequence(text("cd"), opt(folder)))
    grammar.add(sequence(text("mkdir"), remote_fs_folder("new")))
    grammar.add(sequence(text("rm"), remote_fs_path(), repeat(remote_fs_path())))
    grammar.add(sequence(text("tree"), opt(folder), opt(wholenumber(2))))
    grammar.add(sequence(text("get"), remote_fs_file(), opt(local_fs_folder())))
    grammar.add(sequence(text("put"), local_fs_file(), opt(folder)))
    grammar.add(sequence(text("lcd"), local_fs_folder()))
    grammar.add(text("pwd"))
    grammar.add(sequence(text("echo"), repeat(param("text"))))
    grammar.add(sequence(text("help"), opt(either(*(text(c) for c in COMMANDS)))))
    grammar.add(either(text("quit"), text("exit")))
    return grammar


class ShellCommandHandler:
    """
    Executes demo shell command lines.

    Commands:
    - ls [-R] [folder] - List a remote folder
    - cd [folder] - Change remote folder
    - mkdir <folder> - Create remote folder
    - rm <path>... - Remove remote files or folders
    - tree [folder] [depth] - Show remote tree
    - get <file> [localfolder] - Copy remote file name to a local empty file
    - put <localfile> [folder] - Add a local file's name to the remote side
    - lcd <localfolder> - Change local folder
    - pwd - Show both current folders
    - echo <text>... - Print the words back
    - help [command] - Show usage
    - quit - Exit
    """

    def __init__(self, remote: Optional[MemoryFileSystem] = None, unix_style: bool = True):
        """
        Initialize handler.

        Args:
            remote: Remote filesystem; an empty one is created if omitted
            unix_style: Quoting convention for splitting command lines
        """
        self.remote = remote if remote is not None else MemoryFileSystem()
        self.unix_style = unix_style
        self.grammar = build_grammar()

        self.commands: dict[str, Callable] = {
            "ls": self.cmd_ls,
            "cd": self.cmd_cd,
            "mkdir": self.cmd_mkdir,
            "rm": self.cmd_rm,
            "tree": self.cmd_tree,
            "get": self.cmd_get,
            "put": self.cmd_put,
            "lcd": self.cmd_lcd,
            "pwd": self.cmd_pwd,
            "echo": self.cmd_echo,
            "help": self.cmd_help,
            "quit": self.cmd_quit,
            "exit": self.cmd_quit,
        }

    def execute(self, line: str) -> tuple[str, bool]:
        """
        Execute a command line.

        Args:
            line: The command line

        Returns:
            Tuple of (output_message, should_exit)
        """
        words = [w.text for w in tokenize(line, self.unix_style)]
        if not words:
            return "", False

        handler = self.commands.get(words[0].lower())
        if not handler:
            return f"Unknown command: {words[0]}", False

        try:
            return handler(words[1:])
        except Exception as e:
            return f"Error: {e}", False

    def usage(self) -> str:
        """Usage text rendered from the grammar."""
        return "Commands:\n" + self.grammar.describe()

    # Command implementations

    def _folder(self, path: str) -> int:
        handle = self.remote.resolve(self.remote.cwd, path)
        if handle is None or not self.remote.is_valid(handle):
            raise ValueError(f"No such folder: {path}")
        return handle

    def cmd_ls(self, args: list[str]) -> tuple[str, bool]:
        """List a remote folder."""
        recursive = any(a.upper() == "-R" for a in args)
        paths = [a for a in args if a.upper() != "-R"]
        handle = self._folder(paths[0]) if paths else self.remote.cwd
        if recursive:
            return self._tree(handle, None), False
        return "\n".join(self.remote.list(handle, True, True)), False

    def cmd_cd(self, args: list[str]) -> tuple[str, bool]:
        """Change the remote folder."""
        self.remote.cwd = self._folder(args[0]) if args else self.remote.root
        return "", False

    def cmd_mkdir(self, args: list[str]) -> tuple[str, bool]:
        """Create a remote folder."""
        if not args:
            return "Usage: mkdir <folder>", False
        self.remote.add(args[0], is_folder=True)
        return "", False

    def cmd_rm(self, args: list[str]) -> tuple[str, bool]:
        """Remove remote nodes."""
        if not args:
            return "Usage: rm <path>...", False
        for path in args:
            handle = self.remote.resolve(self.remote.cwd, path)
            if handle is None:
                return f"No such path: {path}", False
            if handle in (self.remote.root, self.remote.cwd):
                return f"Cannot remove current folder: {path}", False
            self.remote.remove(handle)
        return "", False

    def cmd_tree(self, args: list[str]) -> tuple[str, bool]:
        """Show a remote tree."""
        if len(args) == 1 and args[0].isdigit() and self.remote.resolve(self.remote.cwd, args[0]) is None:
            # a lone number names the depth unless a folder has that name
            args = [".", args[0]]
        depth = int(args[1]) if len(args) > 1 else 2
        handle = self._folder(args[0]) if args else self.remote.cwd
        return self._tree(handle, depth), False

    def _tree(self, handle: int, depth: Optional[int], indent: int = 0) -> str:
        lines = []
        for name in self.remote.list(handle, True, True):
            lines.append("  " * indent + name)
            if name.endswith(self.remote.SEPARATOR) and (depth is None or depth > 1):
                child = self.remote.resolve(handle, name)
                sub = self._tree(child, None if depth is None else depth - 1, indent + 1)
                if sub:
                    lines.append(sub)
        return "\n".join(lines)

    def cmd_get(self, args: list[str]) -> tuple[str, bool]:
        """Create an empty local file named after a remote file."""
        if not args:
            return "Usage: get <file> [localfolder]", False
        handle = self.remote.resolve(self.remote.cwd, args[0])
        if handle is None or self.remote.is_valid(handle):
            return f"No such file: {args[0]}", False
        target = Path(args[1]) if len(args) > 1 else Path(".")
        dest = target / self.remote.nodes[handle].name
        dest.touch()
        return f"Downloaded {dest}", False

    def cmd_put(self, args: list[str]) -> tuple[str, bool]:
        """Add a local file's name to a remote folder."""
        if not args:
            return "Usage: put <localfile> [folder]", False
        source = Path(args[0])
        if not source.is_file():
            return f"No such local file: {source}", False
        folder = self._folder(args[1]) if len(args) > 1 else self.remote.cwd
        self.remote.add(self.remote.path_of(folder).rstrip("/") + "/" + source.name)
        return f"Uploaded {source.name}", False

    def cmd_lcd(self, args: list[str]) -> tuple[str, bool]:
        """Change the local folder."""
        if not args:
            return "Usage: lcd <localfolder>", False
        os.chdir(Path(args[0]).expanduser())
        return "", False

    def cmd_pwd(self, args: list[str]) -> tuple[str, bool]:
        """Show current folders."""
        return f"remote: {self.remote.path_of(self.remote.cwd)}\nlocal: {Path.cwd()}", False

    def cmd_echo(self, args: list[str]) -> tuple[str, bool]:
        """Print the words back."""
        return " ".join(args), False

    def cmd_help(self, args: list[str]) -> tuple[str, bool]:
        """Show usage."""
        if args:
            for alternative in self.grammar.eithers:
                usage = alternative.describe()
                names = usage.split()[0].strip("()").split("|")
                if args[0].lower() in names:
                    return usage, False
            return f"Unknown command: {args[0]}", False
        return self.usage(), False

    def cmd_quit(self, args: list[str]) -> tuple[str, bool]:
        """Exit the shell."""
        return "Goodbye!", True
