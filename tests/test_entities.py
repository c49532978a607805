"""Tests for the Entry entity."""

import pytest

from phonebook.domain import Entry


def test_entry_strips_whitespace() -> None:
    entry = Entry(name="  Ann ", number=" 555-0001 ")
    assert entry.name == "Ann"
    assert entry.number == "555-0001"


def test_entry_number_is_free_text() -> None:
    assert Entry(name="Ann", number="call after 6pm").number == "call after 6pm"


@pytest.mark.parametrize("name", ["", "   "])
def test_entry_rejects_empty_name(name: str) -> None:
    with pytest.raises(ValueError, match="name"):
        Entry(name=name, number="555-0001")


@pytest.mark.parametrize("number", ["", "   "])
def test_entry_rejects_empty_number(number: str) -> None:
    with pytest.raises(ValueError, match="number"):
        Entry(name="Ann", number=number)


def test_entry_is_immutable() -> None:
    entry = Entry(name="Ann", number="555-0001")
    with pytest.raises(AttributeError):
        entry.number = "555-9999"


def test_entry_fields_are_required() -> None:
    with pytest.raises(TypeError):
        Entry()
    with pytest.raises(TypeError):
        Entry(name="Ann")
