"""
Shell actions and dispatch.

The window turns a button press into an action; dispatch runs it against the
DirectoryService and returns what to show. No widget references here.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from kiosk.formatting import (
    format_confirmation,
    format_delete,
    format_listing,
    format_message,
    format_saved,
    format_search,
)
from phonebook.application import (
    Added,
    ConfirmationRequired,
    Deleted,
    DirectoryService,
    Invalid,
    Updated,
)

logger = logging.getLogger(__name__)


class ActionKind(Enum):
    ADD = "add"
    DELETE = "delete"
    SEARCH = "search"
    SHOW_ALL = "show_all"


@dataclass(frozen=True)
class AddAction:
    name: str
    number: str


@dataclass(frozen=True)
class DeleteAction:
    name: str


@dataclass(frozen=True)
class SearchAction:
    term: str


@dataclass(frozen=True)
class ShowAllAction:
    pass


Action = AddAction | DeleteAction | SearchAction | ShowAllAction


@dataclass(frozen=True)
class Render:
    """Replace the output area with text."""

    text: str


@dataclass(frozen=True)
class Warn:
    """Show a modal warning; the output area is left as it is."""

    title: str
    text: str


Outcome = Render | Warn

# (title, question) -> True for yes
Confirm = Callable[[str, str], bool]

_MISSING_INPUT_WARNINGS = {
    AddAction: "warn_add_missing",
    DeleteAction: "warn_delete_missing",
    SearchAction: "warn_search_missing",
}


def build_action(kind: ActionKind, name: str, number: str) -> Action:
    """Map the raw form inputs to an action. Search uses the name field as its text."""
    if kind is ActionKind.ADD:
        return AddAction(name=name, number=number)
    if kind is ActionKind.DELETE:
        return DeleteAction(name=name)
    if kind is ActionKind.SEARCH:
        return SearchAction(term=name)
    return ShowAllAction()


def _warn(messages: dict, action: Action) -> Warn:
    return Warn(
        title=format_message(messages, "warning_title"),
        text=format_message(messages, _MISSING_INPUT_WARNINGS[type(action)]),
    )


def _with_listing(service: DirectoryService, messages: dict, text: str) -> Render:
    return Render(text=text + "\n\n" + format_listing(messages, service.list_all()))


def dispatch(
    service: DirectoryService,
    action: Action,
    confirm: Confirm,
    messages: dict,
) -> Outcome:
    """Run one action. confirm is only called when an add would overwrite a different number."""
    if isinstance(action, AddAction):
        result = service.add(action.name, action.number)
        if isinstance(result, ConfirmationRequired):
            title, question = format_confirmation(messages, result)
            if not confirm(title, question):
                logger.info("Overwrite of %r declined", result.name)
                return Render(text=format_message(messages, "cancelled"))
            result = service.upsert(result.name, result.number)
        if isinstance(result, Invalid):
            return _warn(messages, action)
        if isinstance(result, (Added, Updated)):
            return _with_listing(service, messages, format_saved(messages, result))

    elif isinstance(action, DeleteAction):
        result = service.delete(action.name)
        if isinstance(result, Invalid):
            return _warn(messages, action)
        if isinstance(result, Deleted):
            return _with_listing(service, messages, format_delete(messages, result))
        return Render(text=format_delete(messages, result))

    elif isinstance(action, SearchAction):
        result = service.search(action.term)
        if isinstance(result, Invalid):
            return _warn(messages, action)
        return Render(text=format_search(messages, result))

    elif isinstance(action, ShowAllAction):
        return Render(text=format_listing(messages, service.list_all()))

    raise TypeError(f"Unsupported action: {action!r}")
