"""Tkinter form: name/number inputs, four buttons, read-only output area."""

import tkinter as tk
from tkinter import messagebox, scrolledtext

from kiosk.actions import ActionKind

OUTPUT_FONT = ("Courier", 12)


class PhoneBookWindow:
    """Implements ShellView on a Tk root. Buttons call on_trigger with an ActionKind."""

    def __init__(self, root: tk.Tk, labels: dict) -> None:
        self.root = root
        self.root.title(labels["window_title"])
        self._on_trigger = None

        # Input frame
        input_frame = tk.LabelFrame(root, text=labels["input_frame"], padx=10, pady=5)
        input_frame.pack(side=tk.TOP, fill=tk.X, padx=10, pady=5)

        self.name_var = tk.StringVar()
        self.number_var = tk.StringVar()

        tk.Label(input_frame, text=labels["name"]).grid(row=0, column=0, padx=5)
        tk.Entry(input_frame, textvariable=self.name_var, width=15).grid(row=0, column=1, padx=5)
        tk.Label(input_frame, text=labels["number"]).grid(row=0, column=2, padx=5)
        tk.Entry(input_frame, textvariable=self.number_var, width=15).grid(row=0, column=3, padx=5)

        # Buttons: add/delete side by side, search and show-all full width
        control_frame = tk.Frame(root)
        control_frame.pack(side=tk.LEFT, fill=tk.Y, padx=10, pady=5)

        tk.Button(control_frame, text=labels["add"], command=lambda: self._fire(ActionKind.ADD)).grid(
            row=0, column=0, sticky="ew", padx=5, pady=5
        )
        tk.Button(control_frame, text=labels["delete"], command=lambda: self._fire(ActionKind.DELETE)).grid(
            row=0, column=1, sticky="ew", padx=5, pady=5
        )
        tk.Button(control_frame, text=labels["search"], command=lambda: self._fire(ActionKind.SEARCH)).grid(
            row=1, column=0, columnspan=2, sticky="ew", padx=5, pady=5
        )
        tk.Button(control_frame, text=labels["show_all"], command=lambda: self._fire(ActionKind.SHOW_ALL)).grid(
            row=2, column=0, columnspan=2, sticky="ew", padx=5, pady=5
        )

        # Output
        output_frame = tk.LabelFrame(root, text=labels["output_frame"], padx=5, pady=5)
        output_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=10, pady=5)
        self.output = scrolledtext.ScrolledText(
            output_frame, width=50, height=15, font=OUTPUT_FONT, state=tk.DISABLED
        )
        self.output.pack(fill=tk.BOTH, expand=True)

    def bind(self, on_trigger) -> None:
        """Route button presses to on_trigger(kind)."""
        self._on_trigger = on_trigger

    def _fire(self, kind: ActionKind) -> None:
        if self._on_trigger is not None:
            self._on_trigger(kind)

    # --- ShellView ---

    def read_inputs(self) -> tuple[str, str]:
        return self.name_var.get(), self.number_var.get()

    def clear_inputs(self) -> None:
        self.name_var.set("")
        self.number_var.set("")

    def show_output(self, text: str) -> None:
        self.output.config(state=tk.NORMAL)
        self.output.delete("1.0", tk.END)
        self.output.insert(tk.END, text)
        self.output.config(state=tk.DISABLED)

    def show_warning(self, title: str, text: str) -> None:
        messagebox.showwarning(title, text, parent=self.root)

    def ask_yes_no(self, title: str, text: str) -> bool:
        return bool(messagebox.askyesno(title, text, parent=self.root))
