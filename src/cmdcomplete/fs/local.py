# cmdcomplete.fs.local - Local filesystem listing
"""
Lists local directory entries for path completion.
"""
import os
from pathlib import Path
from typing import Protocol, Sequence


class LocalListing(Protocol):
    """Anything that can list entries next to a partial local path."""

    def list(self, path_prefix: str, want_files: bool, want_folders: bool) -> Sequence[str]:
        ...


class FileSystemListing:
    """
    Lists entries of the directory a partial path points into.

    Folder names carry a trailing separator so that completing a folder
    leaves the cursor ready for the next path component.
    """

    def __init__(self, root: Path | None = None):
        """
        Initialize listing.

        Args:
            root: Directory relative paths are resolved against. Defaults to
                the process working directory at call time.
        """
        self.root = root

    def _directory(self, path_prefix: str) -> Path:
        cut = max(path_prefix.rfind("/"), path_prefix.rfind(os.sep)) + 1
        folder = Path(path_prefix[:cut] or ".").expanduser()
        if not folder.is_absolute() and self.root is not None:
            folder = self.root / folder
        return folder

    def list(self, path_prefix: str, want_files: bool, want_folders: bool) -> list[str]:
        """
        List entry names in the directory of path_prefix.

        Args:
            path_prefix: The partial path being completed
            want_files: Include files
            want_folders: Include folders

        Returns:
            Sorted entry names, folders suffixed with a separator
        """
        names = []
        for entry in sorted(self._directory(path_prefix).iterdir()):
            if entry.is_dir():
                if want_folders:
                    names.append(entry.name + os.sep)
            elif want_files:
                names.append(entry.name)
        return names
