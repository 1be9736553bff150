"""Protocol layer for the file share REST API."""

from .operations import DirectoryOperations, FileOperations

__all__ = [
    "DirectoryOperations",
    "FileOperations",
]
