"""Render directory results as the text shown in the output area."""

import re

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

# Minimum width of the name column; longer names are not cut.
NAME_WIDTH = 10

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def format_message(messages: dict, message_id: str, template_vars: dict | None = None) -> str:
    """Fill {placeholders} in one pass. Substituted values are never rescanned."""
    text = messages.get(message_id) or message_id
    values = template_vars or {}

    def _fill(match: re.Match) -> str:
        key = match.group(1)
        if key not in values:
            return match.group(0)
        value = values[key]
        return str(value) if value is not None else ""

    return _PLACEHOLDER.sub(_fill, text)


def format_entries(messages: dict, header: str, entries: tuple[Entry, ...]) -> str:
    lines = [header, format_message(messages, "separator")]
    for entry in entries:
        lines.append(
            format_message(
                messages,
                "entry_line",
                {"name": entry.name.ljust(NAME_WIDTH), "number": entry.number},
            )
        )
    return "\n".join(lines) + "\n"


def format_listing(messages: dict, result: Listing | EmptyDirectory) -> str:
    if isinstance(result, EmptyDirectory):
        return format_message(messages, "empty_directory")
    header = format_message(messages, "listing_header", {"count": result.count})
    return format_entries(messages, header, result.entries)


def format_search(messages: dict, result: SearchResults | NoMatch) -> str:
    if isinstance(result, NoMatch):
        return format_message(messages, "no_match", {"term": result.term})
    header = format_message(
        messages, "search_header", {"term": result.term, "count": result.count}
    )
    return format_entries(messages, header, result.entries)


def format_saved(messages: dict, result: Added | Updated) -> str:
    message_id = "added" if isinstance(result, Added) else "updated"
    return format_message(
        messages, message_id, {"name": result.name, "number": result.number}
    )


def format_delete(messages: dict, result: Deleted | NotFound) -> str:
    message_id = "deleted" if isinstance(result, Deleted) else "delete_not_found"
    return format_message(messages, message_id, {"name": result.name})


def format_confirmation(messages: dict, result: ConfirmationRequired) -> tuple[str, str]:
    """Return (title, question) for the overwrite prompt."""
    question = format_message(
        messages,
        "confirm_overwrite",
        {
            "name": result.name,
            "existing_number": result.existing_number,
            "number": result.number,
        },
    )
    return format_message(messages, "confirm_title"), question
