"""Register volunteer dialog."""

import tkinter as tk
from tkinter import messagebox, ttk
from typing import Optional

from volunteerlog.core.exceptions import DuplicateOrEmptyIdentifierError
from volunteerlog.core.logging import get_logger
from volunteerlog.db.models import VolunteerRecord
from volunteerlog.db.store import VolunteerStore

logger = get_logger(__name__)

REGISTERED_MESSAGE = "Volunteer registered successfully!"
DUPLICATE_MESSAGE = "Email already exists or is empty!"


class RegisterVolunteerDialog:
    """Name / Email / Phone form that registers a volunteer in the store."""

    def __init__(self, parent: tk.Widget, store: VolunteerStore):
        self.parent = parent
        self.store = store
        self._record: Optional[VolunteerRecord] = None
        self._dialog: Optional[tk.Toplevel] = None

        self._name_var = tk.StringVar()
        self._email_var = tk.StringVar()
        self._phone_var = tk.StringVar()

    def show(self) -> Optional[VolunteerRecord]:
        """Display dialog. Returns the new record, or None if cancelled."""
        self._dialog = tk.Toplevel(self.parent)
        self._dialog.title("Register Volunteer")
        self._dialog.geometry("360x200")
        self._dialog.transient(self.parent.winfo_toplevel())
        self._dialog.grab_set()

        main = ttk.Frame(self._dialog, padding=12)
        main.pack(fill=tk.BOTH, expand=True)

        row = 0
        first_entry: Optional[ttk.Entry] = None
        for label, var in (
            ("Name:", self._name_var),
            ("Email:", self._email_var),
            ("Phone:", self._phone_var),
        ):
            ttk.Label(main, text=label).grid(row=row, column=0, sticky="e", padx=4, pady=4)
            entry = ttk.Entry(main, textvariable=var, width=30)
            entry.grid(row=row, column=1, sticky="w", padx=4, pady=4)
            if first_entry is None:
                first_entry = entry
            row += 1

        btn_frame = ttk.Frame(main)
        btn_frame.grid(row=row, column=0, columnspan=2, pady=12)
        ttk.Button(btn_frame, text="OK", command=self._on_ok, style="Accent.TButton").pack(
            side=tk.LEFT, padx=8
        )
        ttk.Button(btn_frame, text="Cancel", command=self._on_cancel).pack(side=tk.LEFT, padx=8)

        self._dialog.bind("<Return>", lambda e: self._on_ok())
        self._dialog.bind("<Escape>", lambda e: self._on_cancel())
        if first_entry is not None:
            first_entry.focus_set()

        self._dialog.wait_window()
        return self._record

    def _on_ok(self) -> None:
        """Register the volunteer; keep the form open on failure."""
        parent = self._dialog if self._dialog else self.parent.winfo_toplevel()
        try:
            self._record = self.store.register(
                self._name_var.get(),
                self._email_var.get(),
                self._phone_var.get(),
            )
        except DuplicateOrEmptyIdentifierError as e:
            logger.info("Registration rejected", extra={"context": {"error": str(e)}})
            messagebox.showerror("Error", DUPLICATE_MESSAGE, parent=parent)
            return

        messagebox.showinfo("Register Volunteer", REGISTERED_MESSAGE, parent=parent)
        if self._dialog:
            self._dialog.destroy()

    def _on_cancel(self) -> None:
        if self._dialog:
            self._dialog.destroy()
