"""Entries loaded into the directory at startup."""

from phonebook.domain import Entry
from phonebook.infrastructure.memory_repository import InMemoryDirectoryRepository

SEED_ENTRIES: tuple[Entry, ...] = (
    Entry(name="Kim Donghyun", number="010-1234-5678"),
    Entry(name="Park Jisu", number="010-9876-5432"),
    Entry(name="Lee Haneul", number="010-5555-7777"),
    Entry(name="Choi Minho", number="010-2222-3333"),
)


def seeded_repository() -> InMemoryDirectoryRepository:
    """Return a fresh repository holding the seed entries. Each call is independent."""
    return InMemoryDirectoryRepository(SEED_ENTRIES)
