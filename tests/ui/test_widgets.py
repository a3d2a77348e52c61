import pytest

try:
    import tkinter as tk
except Exception:  # pragma: no cover - tkinter missing
    tk = None  # type: ignore

from pysetting import Setting, boolean_codec, enum_codec, integer_codec
from pysetting.ui.widgets import EditorWidget, check_editor, choice_editor, entry_editor
from tests.utils import Theme


def _make_root():
    if tk is None:
        pytest.skip("tkinter not available")
    try:
        root = tk.Tk()
    except Exception:
        pytest.skip("no display available")
    root.withdraw()
    return root


def test_entry_editor_values():
    root = _make_root()
    editor = entry_editor(root)
    assert isinstance(editor, EditorWidget)
    assert editor.get_value() is None
    editor.set_value(12)
    assert editor.get_value() == "12"
    editor.set_value(None)
    assert editor.get_value() is None
    root.destroy()


def test_check_and_choice_editors():
    root = _make_root()
    check = check_editor(root)
    check.set_value(True)
    assert check.get_value() is True
    choice = choice_editor(["A", "B"], root)
    assert choice.get_value() is None
    choice.set_value("B")
    assert choice.get_value() == "B"
    root.destroy()


def test_setting_nodes_with_tk_editors():
    root = _make_root()
    retries = Setting("retries", "net", integer_codec(), int, default_value=3)
    node = retries.create_node()
    assert node.get_value() == "3"
    node.set_value("7")
    assert retries.read_value_from_node(node) == 7

    flag = Setting("flag", "net", boolean_codec(), bool, default_value=True)
    assert flag.create_node().get_value() is True

    theme = Setting("theme", "ui", enum_codec(Theme), Theme, default_value=Theme.DARK)
    assert theme.create_node().get_value() == "DARK"
    root.destroy()
