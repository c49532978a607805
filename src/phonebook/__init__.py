"""
Phone book core: clean-architecture layout.

- domain: entities (Entry). No outer dependencies.
- application: use cases (DirectoryService), ports (DirectoryRepository), result types.
- infrastructure: adapters (InMemoryDirectoryRepository) and seed data.
"""

from phonebook.application import (
    Added,
    ConfirmationRequired,
    Deleted,
    DirectoryRepository,
    DirectoryService,
    EmptyDirectory,
    Invalid,
    Listing,
    NoMatch,
    NotFound,
    SearchResults,
    Updated,
)
from phonebook.domain import Entry
from phonebook.infrastructure import (
    SEED_ENTRIES,
    InMemoryDirectoryRepository,
    seeded_repository,
)

__all__ = [
    "Added",
    "ConfirmationRequired",
    "Deleted",
    "DirectoryRepository",
    "DirectoryService",
    "EmptyDirectory",
    "Entry",
    "InMemoryDirectoryRepository",
    "Invalid",
    "Listing",
    "NoMatch",
    "NotFound",
    "SEED_ENTRIES",
    "SearchResults",
    "Updated",
    "seeded_repository",
]
