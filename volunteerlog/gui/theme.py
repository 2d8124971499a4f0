"""Visual theme and styling."""

import tkinter as tk
from tkinter import ttk

from volunteerlog.core.logging import get_logger

logger = get_logger(__name__)


# Color palette
COLORS = {
    "bg": "#f4f7f2",
    "bg_alt": "#ffffff",
    "fg": "#2f3a2f",
    "accent": "#3b7d3b",
    "danger": "#c0392b",
    "muted": "#6c757d",
    "status_bg": "#e2e8df",
}

# Fonts
FONTS = {
    "default": ("Segoe UI", 10),
    "large": ("Segoe UI", 12),
    "small": ("Segoe UI", 9),
    "heading": ("Segoe UI", 14),
}


def apply_theme(root: tk.Tk) -> None:
    """Apply theme colours and fonts to the root window."""
    root.configure(bg=COLORS["bg"])
    root.option_add("*Font", FONTS["default"])
    root.option_add("*Background", COLORS["bg"])
    root.option_add("*Foreground", COLORS["fg"])
    configure_styles()
    logger.debug("Theme applied")


def configure_styles() -> None:
    """Configure ttk widget styles."""
    style = ttk.Style()
    try:
        style.theme_use("clam")
    except tk.TclError:
        pass  # fallback to default theme

    style.configure(".", font=FONTS["default"], background=COLORS["bg"], foreground=COLORS["fg"])
    style.configure("TFrame", background=COLORS["bg"])

    # Labels
    style.configure("TLabel", background=COLORS["bg"], foreground=COLORS["fg"])
    style.configure("Heading.TLabel", font=(FONTS["heading"][0], FONTS["heading"][1], "bold"))
    style.configure("Muted.TLabel", foreground=COLORS["muted"])
    style.configure("Danger.TLabel", foreground=COLORS["danger"])

    # Buttons
    style.configure("TButton", padding=(12, 6), font=FONTS["default"])
    style.configure("Accent.TButton", background=COLORS["accent"], foreground="white")
    style.map("Accent.TButton", background=[("active", "#2e632e")])

    # Volunteer table
    style.configure(
        "Treeview",
        font=FONTS["default"],
        rowheight=26,
        background=COLORS["bg_alt"],
        fieldbackground=COLORS["bg_alt"],
    )
    style.configure("Treeview.Heading", font=(FONTS["default"][0], FONTS["default"][1], "bold"))
    style.map(
        "Treeview",
        background=[("selected", COLORS["accent"])],
        foreground=[("selected", "white")],
    )

    style.configure("TEntry", padding=(6, 4))
