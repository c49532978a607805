"""Infrastructure layer: concrete implementations of application ports."""

from phonebook.infrastructure.memory_repository import InMemoryDirectoryRepository
from phonebook.infrastructure.seed import SEED_ENTRIES, seeded_repository

__all__ = [
    "InMemoryDirectoryRepository",
    "SEED_ENTRIES",
    "seeded_repository",
]
