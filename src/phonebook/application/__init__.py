"""Application layer: use cases, ports, and result types. Depends only on domain."""

from phonebook.application.directory_service import DirectoryService
from phonebook.application.dto import (
    Added,
    ConfirmationRequired,
    Deleted,
    EmptyDirectory,
    Invalid,
    Listing,
    NoMatch,
    NotFound,
    SearchResults,
    Updated,
)
from phonebook.application.ports import DirectoryRepository

__all__ = [
    "Added",
    "ConfirmationRequired",
    "Deleted",
    "DirectoryRepository",
    "DirectoryService",
    "EmptyDirectory",
    "Invalid",
    "Listing",
    "NoMatch",
    "NotFound",
    "SearchResults",
    "Updated",
]
