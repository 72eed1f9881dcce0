# cmdcomplete.grammar - Grammar model
from cmdcomplete.grammar.builders import (
    either,
    flag,
    local_fs_file,
    local_fs_folder,
    local_fs_path,
    opt,
    param,
    remote_fs_file,
    remote_fs_folder,
    remote_fs_path,
    repeat,
    sequence,
    text,
    wholenumber,
)
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
from cmdcomplete.grammar.state import ACState, Candidate, Outcome
from cmdcomplete.grammar.tokenizer import Word, identify_next_word, tokenize

__all__ = [
    "ACState",
    "Candidate",
    "Either",
    "Flag",
    "LocalPath",
    "Node",
    "Optional",
    "Outcome",
    "RemotePath",
    "Repeat",
    "Sequence",
    "Text",
    "WholeNumber",
    "Word",
    "either",
    "flag",
    "identify_next_word",
    "local_fs_file",
    "local_fs_folder",
    "local_fs_path",
    "opt",
    "param",
    "remote_fs_file",
    "remote_fs_folder",
    "remote_fs_path",
    "repeat",
    "sequence",
    "text",
    "tokenize",
    "wholenumber",
]
