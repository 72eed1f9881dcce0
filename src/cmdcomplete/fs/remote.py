# cmdcomplete.fs.remote - Remote filesystem collaborators
"""
Protocol for remote filesystem listings and an in-memory implementation.

The remote session and its current directory belong to the embedding
application. Completion only reaches them through a RemoteContext passed
with each request.
"""
import itertools
from dataclasses import dataclass, field
from typing import Callable, Hashable, Optional, Protocol, Sequence


class RemoteListing(Protocol):
    """A remote filesystem as seen by path completion."""

    def is_valid(self, handle: Hashable) -> bool:
        ...

    def resolve(self, handle: Hashable, path: str) -> Optional[Hashable]:
        ...

    def list(self, handle: Hashable, want_files: bool, want_folders: bool) -> Sequence[str]:
        ...


@dataclass
class RemoteContext:
    """
    Remote session plus a getter for its live current directory.

    cwd is called on every traversal, so changes made by command
    execution are always seen.
    """
    client: RemoteListing
    cwd: Callable[[], Hashable]


@dataclass
class RemoteNode:
    """A file or folder of the in-memory filesystem."""
    handle: int
    name: str
    parent: Optional[int]
    is_folder: bool
    children: dict[str, int] = field(default_factory=dict)


class MemoryFileSystem:
    """
    Virtual filesystem kept in memory, addressed by integer handles.

    Implements RemoteListing; the demo shell uses it as its remote side.
    """

    SEPARATOR = "/"

    def __init__(self):
        self._handles = itertools.count(1)
        self.nodes: dict[int, RemoteNode] = {}
        self.root = self._create("", None, True)
        self.cwd = self.root

    def _create(self, name: str, parent: Optional[int], is_folder: bool) -> int:
        handle = next(self._handles)
        self.nodes[handle] = RemoteNode(handle, name, parent, is_folder)
        if parent is not None:
            self.nodes[parent].children[name] = handle
        return handle

    def add(self, path: str, is_folder: bool = False) -> int:
        """
        Add a file or folder, creating missing parent folders.

        Args:
            path: Path relative to the current directory, or absolute
            is_folder: Create a folder instead of a file

        Returns:
            Handle of the node at path
        """
        handle = self.root if path.startswith(self.SEPARATOR) else self.cwd
        parts = [p for p in path.split(self.SEPARATOR) if p]
        for index, part in enumerate(parts):
            last = index == len(parts) - 1
            child = self.nodes[handle].children.get(part)
            if child is None:
                child = self._create(part, handle, is_folder or not last)
            handle = child
        return handle

    def remove(self, handle: int) -> None:
        """Remove a node and everything below it."""
        node = self.nodes.pop(handle)
        for child in list(node.children.values()):
            self.remove(child)
        if node.parent in self.nodes:
            del self.nodes[node.parent].children[node.name]

    def is_valid(self, handle: Hashable) -> bool:
        return handle in self.nodes and self.nodes[handle].is_folder

    def resolve(self, handle: Hashable, path: str) -> Optional[int]:
        """Walk path from handle; None if any component is missing."""
        if path.startswith(self.SEPARATOR):
            handle = self.root
        if handle not in self.nodes:
            return None
        for part in path.split(self.SEPARATOR):
            if not part or part == ".":
                continue
            node = self.nodes[handle]
            if part == "..":
                handle = node.parent if node.parent is not None else handle
                continue
            child = node.children.get(part)
            if child is None:
                return None
            handle = child
        return handle

    def list(self, handle: Hashable, want_files: bool, want_folders: bool) -> list[str]:
        """List names under a folder, folders suffixed with the separator."""
        names = []
        for name, child in sorted(self.nodes[handle].children.items()):
            if self.nodes[child].is_folder:
                if want_folders:
                    names.append(name + self.SEPARATOR)
            elif want_files:
                names.append(name)
        return names

    def path_of(self, handle: int) -> str:
        """Absolute path of a node."""
        parts = []
        while handle != self.root:
            node = self.nodes[handle]
            parts.append(node.name)
            handle = node.parent
        return self.SEPARATOR + self.SEPARATOR.join(reversed(parts))

    def context(self) -> RemoteContext:
        """Build a RemoteContext reading this filesystem's live cwd."""
        return RemoteContext(self, lambda: self.cwd)
