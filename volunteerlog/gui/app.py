"""Main application window."""

import tkinter as tk
from pathlib import Path
from tkinter import messagebox, ttk
from typing import Optional

from volunteerlog.core.config import Config
from volunteerlog.core.exceptions import StoreIOError
from volunteerlog.core.logging import get_logger
from volunteerlog.db.store import VolunteerStore
from volunteerlog.gui.dialogs.log_hours import LogHoursDialog
from volunteerlog.gui.dialogs.register import RegisterVolunteerDialog
from volunteerlog.gui.shortcuts import bind_shortcuts, unbind_shortcuts
from volunteerlog.gui.theme import COLORS, FONTS, apply_theme

logger = get_logger(__name__)

# Columns displayed in the volunteer table
_COLUMNS = ("name", "email", "phone", "total_hours")
_HEADINGS = {
    "name": ("Name", 160),
    "email": ("Email", 200),
    "phone": ("Phone", 120),
    "total_hours": ("Total Hours", 90),
}

SAVED_MESSAGE = "Volunteer log saved successfully!"


class VolunteerLogApp:
    """Main application window.

    Table of volunteers, action buttons and a status bar. All record
    changes go through the store handed in by the caller.
    """

    def __init__(self, store: VolunteerStore, data_path: Path, config: Config):
        self.store = store
        self.data_path = Path(data_path)
        self.config = config
        self.root: Optional[tk.Tk] = None
        self._tree: Optional[ttk.Treeview] = None
        self._status_var: Optional[tk.StringVar] = None
        self._shortcut_sequences: list[str] = []

    def run(self) -> None:
        """Start the application."""
        self._create_window()
        self._create_table()
        self._create_buttons()
        self._create_status_bar()
        self._bind_shortcuts()
        self.refresh()

        assert self.root is not None
        logger.info("GUI ready, entering mainloop")
        self.root.mainloop()

    def _create_window(self) -> None:
        self.root = tk.Tk()
        self.root.title("Volunteer Log")
        self.root.geometry("600x400")
        self.root.minsize(480, 300)
        self.root.protocol("WM_DELETE_WINDOW", self.close)

        apply_theme(self.root)

    def _create_table(self) -> None:
        assert self.root is not None

        tree_frame = ttk.Frame(self.root)
        tree_frame.pack(fill=tk.BOTH, expand=True, padx=8, pady=(8, 4))

        self._tree = ttk.Treeview(tree_frame, columns=_COLUMNS, show="headings", selectmode="browse")
        for col, (text, width) in _HEADINGS.items():
            self._tree.heading(col, text=text)
            anchor = tk.E if col == "total_hours" else tk.W
            self._tree.column(col, width=width, anchor=anchor)

        scrollbar = ttk.Scrollbar(tree_frame, orient=tk.VERTICAL, command=self._tree.yview)
        self._tree.configure(yscrollcommand=scrollbar.set)
        self._tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)

    def _create_buttons(self) -> None:
        assert self.root is not None

        btn_frame = ttk.Frame(self.root)
        btn_frame.pack(fill=tk.X, padx=8, pady=4)
        ttk.Button(btn_frame, text="Register Volunteer", command=self.register_volunteer).pack(
            side=tk.LEFT, padx=4
        )
        ttk.Button(btn_frame, text="Log Hours", command=self.log_hours).pack(side=tk.LEFT, padx=4)
        ttk.Button(
            btn_frame, text="Save to File", command=self.save, style="Accent.TButton",
        ).pack(side=tk.LEFT, padx=4)

    def _create_status_bar(self) -> None:
        assert self.root is not None

        status_frame = tk.Frame(self.root, bg=COLORS["status_bg"], height=24)
        status_frame.pack(fill=tk.X, side=tk.BOTTOM)
        status_frame.pack_propagate(False)

        self._status_var = tk.StringVar(value="Ready")
        tk.Label(
            status_frame, textvariable=self._status_var,
            font=FONTS["small"], bg=COLORS["status_bg"], fg=COLORS["muted"],
            anchor=tk.W,
        ).pack(fill=tk.X, padx=8)

    def _bind_shortcuts(self) -> None:
        assert self.root is not None
        self._shortcut_sequences = bind_shortcuts(
            self.root,
            {
                "register": self.register_volunteer,
                "log_hours": self.log_hours,
                "save": self.save,
                "close": self.close,
            },
        )

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def register_volunteer(self) -> None:
        """Open the registration form."""
        assert self.root is not None
        record = RegisterVolunteerDialog(self.root, self.store).show()
        if record is not None:
            self.refresh()

    def log_hours(self) -> None:
        """Open the hour logging flow."""
        assert self.root is not None
        hours = LogHoursDialog(self.root, self.store, self.config.organization_name).show()
        if hours is not None:
            self.refresh()

    def save(self) -> bool:
        """Write the store to the data file. Returns True on success."""
        assert self.root is not None
        try:
            count = self.store.save(self.data_path)
        except StoreIOError as e:
            messagebox.showerror("Error", f"Error saving file: {e.__cause__ or e}", parent=self.root)
            return False

        messagebox.showinfo("Save to File", SAVED_MESSAGE, parent=self.root)
        self._update_status_bar(f"Saved {count} volunteers to {self.data_path.name}")
        return True

    def refresh(self) -> None:
        """Rebuild the table from the store."""
        if self._tree is None:
            return

        for item in self._tree.get_children():
            self._tree.delete(item)

        records = self.store.list_records()
        for record in records:
            self._tree.insert(
                "", tk.END, iid=record.identifier,
                values=(record.name, record.identifier, record.contact, record.total_hours),
            )

        total = sum(r.total_hours for r in records)
        self._update_status_bar(f"{len(records)} volunteers, {total} hours logged")

    def close(self) -> None:
        """Close application, offering to save unsaved changes."""
        assert self.root is not None

        if self.store.is_dirty:
            answer = messagebox.askyesnocancel(
                "Unsaved Changes", "Save changes before closing?", parent=self.root,
            )
            if answer is None:
                return
            if answer and not self.save():
                return

        unbind_shortcuts(self.root, self._shortcut_sequences)
        self._shortcut_sequences = []

        logger.info("Application closing")
        self.root.quit()
        self.root.destroy()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _update_status_bar(self, message: str) -> None:
        if self._status_var:
            self._status_var.set(message)
