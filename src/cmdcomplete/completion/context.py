# cmdcomplete.completion.context - Per-request collaborators
"""
Collaborators handed to a completion request.
"""
from dataclasses import dataclass, field
from typing import Optional

from cmdcomplete.fs.local import FileSystemListing, LocalListing
from cmdcomplete.fs.remote import RemoteContext


@dataclass
class CompletionContext:
    """
    Listing collaborators for path nodes.

    remote may be None, in which case remote paths offer nothing.
    """
    local: LocalListing = field(default_factory=FileSystemListing)
    remote: Optional[RemoteContext] = None
