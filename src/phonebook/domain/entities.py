"""Domain entities: Entry."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    """
    One name -> phone number pair in the directory.
    The name is the unique key; the number is free text and never validated for format.
    """

    name: str
    number: str

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Entry name must be non-empty.")

        if not self.number or not self.number.strip():
            raise ValueError("Entry number must be non-empty.")

        object.__setattr__(self, "name", self.name.strip())
        object.__setattr__(self, "number", self.number.strip())
