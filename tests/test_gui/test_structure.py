"""Test GUI code structure without running tkinter.

Tests that can run in CI without a display.
"""

import ast
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parents[2] / "volunteerlog"


def _class_methods(path: Path, class_name: str) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    for node in ast.walk(tree):
        if isinstance(node, ast.ClassDef) and node.name == class_name:
            return {n.name for n in node.body if isinstance(n, ast.FunctionDef)}
    raise AssertionError(f"{class_name} class should exist in {path.name}")


def test_gui_app_structure():
    """app.py has the window, table, buttons and actions."""
    methods = _class_methods(PACKAGE_DIR / "gui" / "app.py", "VolunteerLogApp")
    required_methods = {
        "__init__",
        "run",
        "_create_window",
        "_create_table",
        "_create_buttons",
        "_create_status_bar",
        "_bind_shortcuts",
        "register_volunteer",
        "log_hours",
        "save",
        "refresh",
        "close",
        "_update_status_bar",
    }
    for method in required_methods:
        assert method in methods, f"VolunteerLogApp should have {method} method"


def test_register_dialog_structure():
    methods = _class_methods(PACKAGE_DIR / "gui" / "dialogs" / "register.py", "RegisterVolunteerDialog")
    assert {"__init__", "show", "_on_ok", "_on_cancel"} <= methods


def test_log_hours_dialog_structure():
    methods = _class_methods(PACKAGE_DIR / "gui" / "dialogs" / "log_hours.py", "LogHoursDialog")
    assert {"__init__", "show", "_show_times_form", "_on_ok", "_on_cancel"} <= methods


def test_app_has_three_action_buttons():
    """The window offers Register Volunteer, Log Hours and Save to File."""
    source = (PACKAGE_DIR / "gui" / "app.py").read_text(encoding="utf-8")
    for label in ("Register Volunteer", "Log Hours", "Save to File"):
        assert f'text="{label}"' in source


def test_table_columns():
    """Table shows name, email, phone and total hours."""
    tree = ast.parse((PACKAGE_DIR / "gui" / "app.py").read_text(encoding="utf-8"))
    columns = None
    for node in ast.walk(tree):
        if isinstance(node, ast.Assign):
            for target in node.targets:
                if isinstance(target, ast.Name) and target.id == "_COLUMNS":
                    columns = ast.literal_eval(node.value)
    assert columns == ("name", "email", "phone", "total_hours")
