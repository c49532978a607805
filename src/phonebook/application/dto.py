"""Result types for directory operations. One dataclass per outcome."""

from dataclasses import dataclass

from phonebook.domain import Entry


@dataclass(frozen=True)
class Invalid:
    """A required input (name, number or search text) was empty."""

    reason: str


# --- add / upsert results ---


@dataclass(frozen=True)
class Added:
    """A new name was stored."""

    name: str
    number: str


@dataclass(frozen=True)
class Updated:
    """An existing name now maps to a new number."""

    name: str
    number: str
    previous_number: str


@dataclass(frozen=True)
class ConfirmationRequired:
    """Name already stored with a different number. Nothing written; call upsert once the user agrees."""

    name: str
    existing_number: str
    number: str


# --- delete results ---


@dataclass(frozen=True)
class Deleted:
    name: str


@dataclass(frozen=True)
class NotFound:
    """No entry with this name. Nothing was removed."""

    name: str


# --- search / list results ---


@dataclass(frozen=True)
class SearchResults:
    """Entries whose name contains the term, in directory order."""

    term: str
    entries: tuple[Entry, ...]

    @property
    def count(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class NoMatch:
    term: str


@dataclass(frozen=True)
class Listing:
    """Every stored entry, in directory order. Never empty (see EmptyDirectory)."""

    entries: tuple[Entry, ...]

    @property
    def count(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class EmptyDirectory:
    pass
