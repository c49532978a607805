"""
Phone book kiosk: tkinter window + DirectoryService over the seeded in-memory directory.
Run: python -m kiosk (from repo root, optional .env for LOG_LEVEL / MESSAGES_PATH / SHELL_MACHINE_PATH).
"""
import logging
from pathlib import Path

from dotenv import load_dotenv

# Repo root: from src/kiosk/__main__.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent
# Load .env from repo root or current dir
for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
    if path.exists():
        load_dotenv(path)
        break

import tkinter as tk  # noqa: E402

from kiosk.controller import ShellController  # noqa: E402
from kiosk.logging_config import configure_logging  # noqa: E402
from kiosk.messages import get_messages  # noqa: E402
from kiosk.shell_machine import get_machine  # noqa: E402
from kiosk.window import PhoneBookWindow  # noqa: E402
from phonebook.application import DirectoryService  # noqa: E402
from phonebook.infrastructure import seeded_repository  # noqa: E402

configure_logging()
logger = logging.getLogger(__name__)


def main() -> None:
    catalog = get_messages()
    machine = get_machine()
    service = DirectoryService(seeded_repository())

    root = tk.Tk()
    window = PhoneBookWindow(root, catalog["labels"])
    controller = ShellController(service, window, catalog["messages"], machine)
    window.bind(controller.trigger)
    controller.show_all()

    logger.info("Phone book kiosk running")
    root.mainloop()


if __name__ == "__main__":
    main()
