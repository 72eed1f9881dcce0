# cmdcomplete.fs - Listing collaborators
from cmdcomplete.fs.local import FileSystemListing, LocalListing
from cmdcomplete.fs.remote import MemoryFileSystem, RemoteContext, RemoteListing

__all__ = [
    "FileSystemListing",
    "LocalListing",
    "MemoryFileSystem",
    "RemoteContext",
    "RemoteListing",
]
