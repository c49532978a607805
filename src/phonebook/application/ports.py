"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from phonebook.domain import Entry


class DirectoryRepository(Protocol):
    """Holds the name -> number mapping. Names are unique."""

    def get(self, name: str) -> str | None:
        """Return the number stored for name, or None."""
        ...

    def put(self, entry: Entry) -> bool:
        """Store entry, replacing any number under the same name. Returns True if a name was replaced."""
        ...

    def remove(self, name: str) -> bool:
        """Remove name. Returns True if it was present, False otherwise."""
        ...

    def list_all(self) -> list[Entry]:
        """Return all entries in insertion order."""
        ...
