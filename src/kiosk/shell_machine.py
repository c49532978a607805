"""
Shell state machine: idle -> dispatching -> (confirming -> dispatching) -> idle.

The chart is XState JSON in flows/shell_machine.json, run with xstate-python.
Loading checks that every transition points at a defined state and that the
events the controller sends are wired where it sends them, so a bad file
fails at startup instead of silently dropping button presses.
"""

import json
import logging
import os
from pathlib import Path

from xstate.machine import Machine

logger = logging.getLogger(__name__)

IDLE = "idle"
DISPATCHING = "dispatching"
CONFIRMING = "confirming"

# state -> {event: target} the controller relies on
CONTROLLER_TRANSITIONS = {
    IDLE: {"TRIGGER": DISPATCHING},
    DISPATCHING: {"COLLISION": CONFIRMING, "DONE": IDLE},
    CONFIRMING: {"ANSWERED": DISPATCHING},
}


def _repo_root() -> Path:
    return Path(__file__).resolve().parent.parent.parent


def get_machine_path() -> Path:
    """Return path to the shell chart (SHELL_MACHINE_PATH env or flows/shell_machine.json)."""
    default = _repo_root() / "flows" / "shell_machine.json"
    path = os.environ.get("SHELL_MACHINE_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return default


def _target_of(state: str, event: str, spec) -> str:
    if not isinstance(spec, str) or not spec:
        raise ValueError(f"State '{state}' event '{event}' must name a target state")
    return spec


def validate_config(config: dict) -> None:
    """Raise ValueError unless config is a usable shell chart."""
    if not isinstance(config, dict) or "initial" not in config or "states" not in config:
        raise ValueError("Machine must have 'initial' and 'states'")
    states = config["states"]
    if not isinstance(states, dict):
        raise ValueError("Machine 'states' must be a mapping")
    if config["initial"] != IDLE:
        raise ValueError(f"Machine must start in '{IDLE}'")

    for name, body in states.items():
        for event, spec in ((body or {}).get("on") or {}).items():
            target = _target_of(name, event, spec)
            if target not in states:
                raise ValueError(
                    f"State '{name}' event '{event}' targets unknown state '{target}'"
                )

    for name, expected in CONTROLLER_TRANSITIONS.items():
        if name not in states:
            raise ValueError(f"Machine must define state '{name}'")
        on = (states[name] or {}).get("on") or {}
        for event, target in expected.items():
            if event not in on:
                raise ValueError(f"State '{name}' must handle '{event}'")
            if _target_of(name, event, on[event]) != target:
                raise ValueError(f"State '{name}' event '{event}' must go to '{target}'")


class ShellMachine:
    """One validated chart and its xstate Machine."""

    def __init__(self, config: dict) -> None:
        validate_config(config)
        self.config = config
        self.initial: str = config["initial"]
        self._machine = Machine(config)

    def handles(self, state_value: str, event: str) -> bool:
        if state_value not in self.config["states"]:
            raise ValueError(f"Unknown shell state '{state_value}'")
        return event in ((self.config["states"][state_value] or {}).get("on") or {})

    def transition(self, state_value: str, event: str) -> str | None:
        """Return the state after event, or None if state_value does not handle it."""
        if not self.handles(state_value, event):
            logger.debug("No transition from %s on %s", state_value, event)
            return None
        state = self._machine.state_from(state_value)
        return self._machine.transition(state, event).value


def load_machine(path: Path | None = None) -> ShellMachine:
    if path is None:
        path = get_machine_path()
    config = json.loads(path.read_text(encoding="utf-8"))
    return ShellMachine(config)


# Module-level cache for the default chart
_machine_cache: ShellMachine | None = None


def get_machine(cache: bool = True) -> ShellMachine:
    """Load the default chart (cached by default). Pass cache=False to reload."""
    global _machine_cache
    if cache and _machine_cache is not None:
        return _machine_cache
    _machine_cache = load_machine()
    return _machine_cache
