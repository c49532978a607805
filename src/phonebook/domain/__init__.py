"""Domain layer: entities and value objects. No dependencies on outer layers."""

from phonebook.domain.entities import Entry

__all__ = ["Entry"]
