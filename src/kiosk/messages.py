"""Load and validate the YAML message catalog. Used by formatting and the window."""

import os
from pathlib import Path

import yaml

REQUIRED_MESSAGES = frozenset(
    {
        "listing_header",
        "search_header",
        "separator",
        "entry_line",
        "empty_directory",
        "no_match",
        "added",
        "updated",
        "cancelled",
        "deleted",
        "delete_not_found",
        "confirm_title",
        "confirm_overwrite",
        "warning_title",
        "warn_add_missing",
        "warn_delete_missing",
        "warn_search_missing",
    }
)

REQUIRED_LABELS = frozenset(
    {
        "window_title",
        "input_frame",
        "output_frame",
        "name",
        "number",
        "add",
        "delete",
        "search",
        "show_all",
    }
)


def _repo_root() -> Path:
    """Return repo root (parent of src)."""
    return Path(__file__).resolve().parent.parent.parent


def get_messages_path() -> Path:
    """Return path to the message catalog (MESSAGES_PATH env or flows/messages.yaml)."""
    default = _repo_root() / "flows" / "messages.yaml"
    path = os.environ.get("MESSAGES_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return default


def load_messages(path: Path | None = None) -> dict:
    """Load the catalog and return it as {"messages": {...}, "labels": {...}}.

    Raises ValueError if the document is not a mapping or a required id is missing.
    """
    if path is None:
        path = get_messages_path()
    raw = path.read_text(encoding="utf-8")
    catalog = yaml.safe_load(raw)
    if not isinstance(catalog, dict):
        raise ValueError("Message catalog YAML must be a dict")
    messages = catalog.get("messages")
    if not isinstance(messages, dict) or not messages:
        raise ValueError("Message catalog must have a non-empty 'messages' mapping")
    missing = sorted(REQUIRED_MESSAGES - messages.keys())
    if missing:
        raise ValueError(f"Message catalog is missing messages: {', '.join(missing)}")
    labels = catalog.get("labels") or {}
    if not isinstance(labels, dict):
        raise ValueError("Message catalog 'labels' must be a mapping")
    missing = sorted(REQUIRED_LABELS - labels.keys())
    if missing:
        raise ValueError(f"Message catalog is missing labels: {', '.join(missing)}")
    return {
        "messages": {k: str(v) for k, v in messages.items()},
        "labels": {k: str(v) for k, v in labels.items()},
    }


# Module-level cache for loaded catalog
_messages_cache: dict | None = None


def get_messages(cache: bool = True) -> dict:
    """Load catalog (cached by default). Pass cache=False to reload."""
    global _messages_cache
    if cache and _messages_cache is not None:
        return _messages_cache
    _messages_cache = load_messages()
    return _messages_cache
