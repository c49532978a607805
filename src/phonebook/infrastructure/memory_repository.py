"""In-memory implementation of DirectoryRepository (no persistence)."""

from collections.abc import Iterable

from phonebook.domain import Entry


class InMemoryDirectoryRepository:
    """Stores entries in a dict keyed by name. Order preserved by first insertion;
    overwriting a name keeps its position.
    """

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        self._numbers: dict[str, str] = {}
        for entry in entries:
            self.put(entry)

    def __len__(self) -> int:
        return len(self._numbers)

    def get(self, name: str) -> str | None:
        return self._numbers.get(name)

    def put(self, entry: Entry) -> bool:
        replaced = entry.name in self._numbers
        self._numbers[entry.name] = entry.number
        return replaced

    def remove(self, name: str) -> bool:
        return self._numbers.pop(name, None) is not None

    def list_all(self) -> list[Entry]:
        return [Entry(name=name, number=number) for name, number in self._numbers.items()]
