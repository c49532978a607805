"""Tests for output formatting against the shipped message catalog."""

import pytest

from kiosk.formatting import (
    format_confirmation,
    format_delete,
    format_listing,
    format_message,
    format_saved,
    format_search,
)
from kiosk.messages import load_messages
from phonebook.application import (
    Added,
    ConfirmationRequired,
    Deleted,
    EmptyDirectory,
    Listing,
    NoMatch,
    NotFound,
    SearchResults,
    Updated,
)
from phonebook.domain import Entry
from phonebook.infrastructure import SEED_ENTRIES

SEPARATOR = "=================================="


@pytest.fixture
def messages() -> dict:
    return load_messages()["messages"]


def test_format_message_fills_placeholders() -> None:
    text = format_message({"hi": "Hello {name}, {n}"}, "hi", {"name": "Ann", "n": 3})
    assert text == "Hello Ann, 3"


def test_format_message_unknown_id_falls_back_to_id() -> None:
    assert format_message({}, "nope") == "nope"


def test_listing_of_seed(messages) -> None:
    text = format_listing(messages, Listing(entries=SEED_ENTRIES))
    assert text == (
        "4 entries:\n"
        f"{SEPARATOR}\n"
        "Name: Kim Donghyun | Number: 010-1234-5678\n"
        "Name: Park Jisu  | Number: 010-9876-5432\n"
        "Name: Lee Haneul | Number: 010-5555-7777\n"
        "Name: Choi Minho | Number: 010-2222-3333\n"
    )


def test_short_names_padded_to_column_width(messages) -> None:
    text = format_listing(messages, Listing(entries=(Entry(name="Ann", number="1"),)))
    assert "Name: Ann        | Number: 1" in text.splitlines()


def test_empty_directory_is_not_a_zero_count(messages) -> None:
    text = format_listing(messages, EmptyDirectory())
    assert text == "The phone book has no entries."
    assert "0 entries" not in text


def test_search_results_header(messages) -> None:
    result = SearchResults(term="Ann", entries=(Entry(name="Ann", number="555-0001"),))
    lines = format_search(messages, result).splitlines()
    assert lines[0] == "'Ann' matched 1 entries:"
    assert lines[1] == SEPARATOR
    assert lines[2] == "Name: Ann        | Number: 555-0001"


def test_no_match_echoes_term(messages) -> None:
    text = format_search(messages, NoMatch(term="Zed"))
    assert text == "No matching name found.\n(search term: Zed)"


def test_added_and_updated_messages(messages) -> None:
    added = format_saved(messages, Added(name="Ann", number="555-0001"))
    assert added == "'Ann' was added successfully.\n(number: 555-0001)"
    updated = format_saved(
        messages, Updated(name="Ann", number="555-9999", previous_number="555-0001")
    )
    assert updated == "'Ann' was updated successfully.\n(number: 555-9999)"


def test_delete_messages_distinct(messages) -> None:
    deleted = format_delete(messages, Deleted(name="Ann"))
    missing = format_delete(messages, NotFound(name="Ann"))
    assert deleted == "'Ann' was deleted successfully."
    assert missing == "'Ann' is not in the phone book, so it cannot be deleted."


def test_confirmation_prompt_mentions_both_numbers(messages) -> None:
    title, question = format_confirmation(
        messages,
        ConfirmationRequired(name="Ann", existing_number="555-0001", number="555-9999"),
    )
    assert title == "Confirm overwrite"
    assert "'Ann' is already registered." in question
    assert "555-0001" in question
    assert "555-9999" in question


def test_placeholder_text_in_values_is_kept_literally(messages) -> None:
    entries = (Entry(name="{number}", number="555-0001"),)
    text = format_listing(messages, Listing(entries=entries))
    assert "Name: {number}   | Number: 555-0001" in text.splitlines()

    added = format_saved(messages, Added(name="{number}", number="555-0001"))
    assert added == "'{number}' was added successfully.\n(number: 555-0001)"


def test_search_term_with_placeholder_text(messages) -> None:
    result = SearchResults(term="{count}", entries=(Entry(name="a{count}", number="1"),))
    assert format_search(messages, result).splitlines()[0] == "'{count}' matched 1 entries:"
    assert format_search(messages, NoMatch(term="{term}")) == (
        "No matching name found.\n(search term: {term})"
    )
