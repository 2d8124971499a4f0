"""GUI package - User interface with tkinter.

One window: volunteer table, action buttons, status bar.

Modules:
    - app: Main application window
    - theme: Visual styling
    - shortcuts: Keyboard shortcuts
    - dialogs/: Register and log-hours dialogs
"""
