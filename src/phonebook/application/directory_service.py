"""Directory use cases: add (with overwrite confirmation), delete, search, list."""

import logging

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
from phonebook.domain import Entry

logger = logging.getLogger(__name__)


class DirectoryService:
    """Core flow over one directory: add -> (confirm) -> upsert, delete, search, list."""

    def __init__(self, repository: DirectoryRepository) -> None:
        self._repo = repository

    def add(
        self, name: str, number: str
    ) -> Added | Updated | ConfirmationRequired | Invalid:
        """Store name -> number unless that would replace a different number.

        A collision returns ConfirmationRequired and leaves the directory alone;
        the caller asks the user and then calls upsert.
        """
        name = (name or "").strip()
        number = (number or "").strip()
        if not name or not number:
            return Invalid(reason="Name and number are both required.")

        existing = self._repo.get(name)
        if existing is not None and existing != number:
            logger.debug("Add of %r collides with stored number", name)
            return ConfirmationRequired(
                name=name, existing_number=existing, number=number
            )
        return self.upsert(name, number)

    def upsert(self, name: str, number: str) -> Added | Updated | Invalid:
        """Insert or overwrite unconditionally."""
        try:
            entry = Entry(name=name or "", number=number or "")
        except ValueError as e:
            return Invalid(reason=str(e))

        previous = self._repo.get(entry.name)
        self._repo.put(entry)
        if previous is None:
            logger.info("Added entry %r", entry.name)
            return Added(name=entry.name, number=entry.number)
        logger.info("Updated entry %r", entry.name)
        return Updated(
            name=entry.name, number=entry.number, previous_number=previous
        )

    def delete(self, name: str) -> Deleted | NotFound | Invalid:
        name = (name or "").strip()
        if not name:
            return Invalid(reason="Name is required.")

        if not self._repo.remove(name):
            return NotFound(name=name)
        logger.info("Deleted entry %r", name)
        return Deleted(name=name)

    def search(self, term: str) -> SearchResults | NoMatch | Invalid:
        """Return entries whose name contains term (case-sensitive, literal, partial)."""
        term = (term or "").strip()
        if not term:
            return Invalid(reason="Search text is required.")

        matches = tuple(e for e in self._repo.list_all() if term in e.name)
        if not matches:
            return NoMatch(term=term)
        return SearchResults(term=term, entries=matches)

    def list_all(self) -> Listing | EmptyDirectory:
        entries = tuple(self._repo.list_all())
        if not entries:
            return EmptyDirectory()
        return Listing(entries=entries)
