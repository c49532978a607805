"""Glue between the view, the shell state machine and dispatch."""

import logging
from typing import Protocol

from kiosk.actions import ActionKind, Render, ShowAllAction, build_action, dispatch
from kiosk.shell_machine import IDLE, ShellMachine
from phonebook.application import DirectoryService

logger = logging.getLogger(__name__)


class ShellView(Protocol):
    """What the controller needs from a window. PhoneBookWindow is the tkinter one."""

    def read_inputs(self) -> tuple[str, str]:
        """Return (name, number) as currently typed."""
        ...

    def clear_inputs(self) -> None: ...

    def show_output(self, text: str) -> None:
        """Replace the output area contents."""
        ...

    def show_warning(self, title: str, text: str) -> None: ...

    def ask_yes_no(self, title: str, text: str) -> bool:
        """Block until the user answers. True for yes."""
        ...


class ShellController:
    """Processes one trigger at a time: idle -> dispatching -> (confirming) -> idle."""

    def __init__(
        self,
        service: DirectoryService,
        view: ShellView,
        messages: dict,
        machine: ShellMachine,
    ) -> None:
        self._service = service
        self._view = view
        self._messages = messages
        self._machine = machine
        self.state = machine.initial

    def _send(self, event: str) -> None:
        next_state = self._machine.transition(self.state, event)
        if next_state is None:
            logger.warning("Shell ignored %s in state %s", event, self.state)
            return
        self.state = next_state

    def _confirm(self, title: str, question: str) -> bool:
        self._send("COLLISION")
        try:
            return self._view.ask_yes_no(title, question)
        finally:
            self._send("ANSWERED")

    def show_all(self) -> None:
        """Fill the output area with the full listing (used at startup)."""
        outcome = dispatch(self._service, ShowAllAction(), self._confirm, self._messages)
        self._view.show_output(outcome.text)

    def trigger(self, kind: ActionKind) -> None:
        if self.state != IDLE:
            logger.warning("Trigger %s ignored while %s", kind.value, self.state)
            return
        name, number = self._view.read_inputs()
        action = build_action(kind, name, number)
        self._send("TRIGGER")
        try:
            outcome = dispatch(self._service, action, self._confirm, self._messages)
            if isinstance(outcome, Render):
                self._view.show_output(outcome.text)
            else:
                self._view.show_warning(outcome.title, outcome.text)
        finally:
            self._view.clear_inputs()
            self._send("DONE")
