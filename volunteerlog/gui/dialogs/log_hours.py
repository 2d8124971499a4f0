"""Log hours dialog.

Asks for the volunteer's email first, then the shift start and end
times. Nothing is recorded until both times are valid.
"""

import tkinter as tk
from tkinter import messagebox, simpledialog, ttk
from typing import Optional

from volunteerlog.core.exceptions import (
    InvalidTimeFormatError,
    InvalidTimeRangeError,
    UnknownIdentifierError,
)
from volunteerlog.core.logging import get_logger
from volunteerlog.db.models import VolunteerRecord
from volunteerlog.db.store import VolunteerStore

logger = get_logger(__name__)

UNKNOWN_EMAIL_MESSAGE = "No volunteer found with that email!"
INVALID_TIME_MESSAGE = "Invalid time format! Use HH:mm."
INVALID_RANGE_MESSAGE = "End time must not be earlier than start time."


def thank_you_message(name: str, hours: int, organization: str) -> str:
    """Message shown after hours are logged."""
    return f"Thanks for volunteering at {organization} today for {hours} hours, {name}!"


class LogHoursDialog:
    """Two-step hour logging: email lookup, then start/end times."""

    def __init__(self, parent: tk.Widget, store: VolunteerStore, organization: str):
        self.parent = parent
        self.store = store
        self.organization = organization
        self._volunteer: Optional[VolunteerRecord] = None
        self._hours: Optional[int] = None
        self._dialog: Optional[tk.Toplevel] = None

        self._start_var = tk.StringVar()
        self._end_var = tk.StringVar()

    def show(self) -> Optional[int]:
        """Run the dialog. Returns hours logged, or None if nothing was logged."""
        toplevel = self.parent.winfo_toplevel()
        email = simpledialog.askstring("Log Hours", "Enter volunteer's email:", parent=toplevel)
        if not email or not email.strip():
            return None

        self._volunteer = self.store.get(email)
        if self._volunteer is None:
            logger.info("Log hours: unknown email", extra={"context": {"identifier": email.strip()}})
            messagebox.showerror("Error", UNKNOWN_EMAIL_MESSAGE, parent=toplevel)
            return None

        self._show_times_form()
        return self._hours

    def _show_times_form(self) -> None:
        assert self._volunteer is not None

        self._dialog = tk.Toplevel(self.parent)
        self._dialog.title(f"Log Hours: {self._volunteer.name or self._volunteer.identifier}")
        self._dialog.geometry("340x170")
        self._dialog.transient(self.parent.winfo_toplevel())
        self._dialog.grab_set()

        main = ttk.Frame(self._dialog, padding=12)
        main.pack(fill=tk.BOTH, expand=True)

        ttk.Label(main, text="Start Time (HH:mm):").grid(row=0, column=0, sticky="e", padx=4, pady=4)
        start_entry = ttk.Entry(main, textvariable=self._start_var, width=12)
        start_entry.grid(row=0, column=1, sticky="w", padx=4, pady=4)

        ttk.Label(main, text="End Time (HH:mm):").grid(row=1, column=0, sticky="e", padx=4, pady=4)
        ttk.Entry(main, textvariable=self._end_var, width=12).grid(
            row=1, column=1, sticky="w", padx=4, pady=4
        )

        btn_frame = ttk.Frame(main)
        btn_frame.grid(row=2, column=0, columnspan=2, pady=12)
        ttk.Button(btn_frame, text="OK", command=self._on_ok, style="Accent.TButton").pack(
            side=tk.LEFT, padx=8
        )
        ttk.Button(btn_frame, text="Cancel", command=self._on_cancel).pack(side=tk.LEFT, padx=8)

        self._dialog.bind("<Return>", lambda e: self._on_ok())
        self._dialog.bind("<Escape>", lambda e: self._on_cancel())
        start_entry.focus_set()

        self._dialog.wait_window()

    def _on_ok(self) -> None:
        """Log the shift; keep the form open on bad input."""
        assert self._volunteer is not None
        parent = self._dialog if self._dialog else self.parent.winfo_toplevel()

        try:
            hours = self.store.log_hours(
                self._volunteer.identifier,
                self._start_var.get(),
                self._end_var.get(),
            )
        except InvalidTimeRangeError as e:
            logger.info("Log hours rejected", extra={"context": {"error": str(e)}})
            messagebox.showerror("Error", INVALID_RANGE_MESSAGE, parent=parent)
            return
        except InvalidTimeFormatError as e:
            logger.info("Log hours rejected", extra={"context": {"error": str(e)}})
            messagebox.showerror("Error", INVALID_TIME_MESSAGE, parent=parent)
            return
        except UnknownIdentifierError as e:
            logger.info("Log hours rejected", extra={"context": {"error": str(e)}})
            messagebox.showerror("Error", UNKNOWN_EMAIL_MESSAGE, parent=parent)
            return

        self._hours = hours
        messagebox.showinfo(
            "Log Hours",
            thank_you_message(self._volunteer.name, hours, self.organization),
            parent=parent,
        )
        if self._dialog:
            self._dialog.destroy()

    def _on_cancel(self) -> None:
        if self._dialog:
            self._dialog.destroy()
