# cmdcomplete.grammar.builders - Grammar combinators
"""
Functions for assembling command grammars.

Example:
    ls = sequence(text("ls"), opt(flag("-R")), opt(remote_fs_folder()))
"""
from cmdcomplete.grammar.nodes import (
    Either,
    Flag,
    LocalPath,
    Node,
    Optional,
    RemotePath,
    Repeat,
    Sequence,
    Text,
    WholeNumber,
)


def sequence(*nodes: Node) -> Node:
    """Chain nodes one after another."""
    if not nodes:
        raise ValueError("sequence() needs at least one node")
    result = nodes[-1]
    for node in reversed(nodes[:-1]):
        result = Sequence(node, result)
    return result


def either(*nodes: Node, describe_prefix: str = "") -> Either:
    """Offer a choice among nodes."""
    node = Either(describe_prefix=describe_prefix)
    for n in nodes:
        node.add(n)
    return node


def text(s: str) -> Text:
    return Text(s, False)


def param(s: str) -> Text:
    return Text(s, True)


def flag(s: str) -> Flag:
    return Flag(s)


def opt(n: Node) -> Optional:
    return Optional(n)


def repeat(n: Node) -> Repeat:
    return Repeat(n)


def wholenumber(default_value: int) -> WholeNumber:
    if default_value < 0:
        raise ValueError("default_value must be non-negative")
    return WholeNumber(default_value)


def local_fs_path(description_prefix: str = "") -> LocalPath:
    return LocalPath(True, True, description_prefix)


def local_fs_file(description_prefix: str = "") -> LocalPath:
    return LocalPath(True, False, description_prefix)


def local_fs_folder(description_prefix: str = "") -> LocalPath:
    return LocalPath(False, True, description_prefix)


def remote_fs_path(description_prefix: str = "") -> RemotePath:
    return RemotePath(True, True, description_prefix)


def remote_fs_file(description_prefix: str = "") -> RemotePath:
    return RemotePath(True, False, description_prefix)


def remote_fs_folder(description_prefix: str = "") -> RemotePath:
    return RemotePath(False, True, description_prefix)
