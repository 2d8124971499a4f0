"""Keyboard shortcuts for the main window."""

import tkinter as tk
from typing import Callable, Dict

from volunteerlog.core.logging import get_logger

logger = get_logger(__name__)

# Sequence -> action name
SHORTCUTS: Dict[str, str] = {
    "<Control-n>": "register",
    "<Control-l>": "log_hours",
    "<Control-s>": "save",
    "<Escape>": "close",
}


def _swallow_event(fn: Callable) -> Callable:
    def wrapper(event: tk.Event = None) -> str:  # type: ignore[assignment]
        fn()
        return "break"

    return wrapper


def bind_shortcuts(root: tk.Tk, handlers: Dict[str, Callable]) -> list[str]:
    """Bind the sequences whose action has a handler.

    Args:
        root: The root Tk window
        handlers: Map of action name -> callable (e.g. {"save": on_save})

    Returns:
        Sequences bound, for unbind_shortcuts
    """
    bound = [seq for seq, action in SHORTCUTS.items() if action in handlers]
    for sequence in bound:
        root.bind(sequence, _swallow_event(handlers[SHORTCUTS[sequence]]))

    logger.info("Keyboard shortcuts bound", extra={"context": {"sequences": bound}})
    return bound


def unbind_shortcuts(root: tk.Tk, sequences: list[str]) -> None:
    """Remove bindings made by bind_shortcuts."""
    for sequence in sequences:
        try:
            root.unbind(sequence)
        except tk.TclError:
            pass
