"""Tests for InMemoryDirectoryRepository and the seed data."""

from phonebook.domain import Entry
from phonebook.infrastructure import (
    SEED_ENTRIES,
    InMemoryDirectoryRepository,
    seeded_repository,
)


def test_put_then_get() -> None:
    repo = InMemoryDirectoryRepository()
    assert repo.put(Entry(name="Ann", number="555-0001")) is False
    assert repo.get("Ann") == "555-0001"
    assert repo.get("Bob") is None


def test_put_existing_name_replaces_and_keeps_position() -> None:
    repo = InMemoryDirectoryRepository(
        [Entry(name="Ann", number="1"), Entry(name="Bob", number="2")]
    )
    assert repo.put(Entry(name="Ann", number="3")) is True
    assert len(repo) == 2
    assert [(e.name, e.number) for e in repo.list_all()] == [("Ann", "3"), ("Bob", "2")]


def test_remove() -> None:
    repo = InMemoryDirectoryRepository([Entry(name="Ann", number="1")])
    assert repo.remove("Ann") is True
    assert repo.remove("Ann") is False
    assert repo.list_all() == []


def test_list_all_in_insertion_order() -> None:
    repo = InMemoryDirectoryRepository()
    for name in ("Zoe", "Adam", "Mia"):
        repo.put(Entry(name=name, number="0"))
    assert [e.name for e in repo.list_all()] == ["Zoe", "Adam", "Mia"]


def test_seeded_repository_has_four_entries() -> None:
    repo = seeded_repository()
    assert len(repo) == 4
    assert repo.list_all() == list(SEED_ENTRIES)


def test_seeded_repositories_are_independent() -> None:
    first = seeded_repository()
    first.remove("Park Jisu")
    assert len(seeded_repository()) == 4
