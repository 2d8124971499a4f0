"""Volunteer Log Test Suite.

Test organization mirrors volunteerlog/ structure:
    tests/
    ├── conftest.py          # Shared fixtures
    ├── test_core/           # Config, logging, exceptions
    ├── test_db/             # Records, line format, store
    └── test_gui/            # GUI structure and helpers (no display needed)

Markers:
    - @pytest.mark.gui: Tests that import tkinter
"""
