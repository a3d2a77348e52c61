"""Editor widgets bound to setting values.

Editors follow a very small protocol so codecs can target them without
knowing the toolkit.  The factories below build tkinter/ttk editors; other
toolkits only need to provide objects with ``get_value`` and ``set_value``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

try:  # pragma: no cover - importing tkinter is environment dependent
    import tkinter as tk
    from tkinter import ttk
except Exception:  # pragma: no cover - fallback when tkinter missing
    tk = None  # type: ignore
    ttk = None  # type: ignore


@runtime_checkable
class EditorWidget(Protocol):
    """Protocol all editor widgets must implement."""

    def get_value(self) -> object | None: ...
    def set_value(self, value: object | None) -> None: ...


def _require_tk() -> None:
    if tk is None or ttk is None:  # pragma: no cover - tkinter missing
        raise RuntimeError("tkinter is required for widgets")


def entry_editor(master: Any = None) -> EditorWidget:
    """Single line text editor; empty text reads back as ``None``."""
    _require_tk()
    frame = ttk.Frame(master)
    entry = ttk.Entry(frame)
    entry.pack(side="left", fill="x", expand=True)

    def get_value() -> object | None:
        text = entry.get()
        return text if text != "" else None

    def set_value(value: object | None) -> None:
        entry.delete(0, tk.END)
        if value is not None:
            entry.insert(0, str(value))

    frame.get_value = get_value  # type: ignore[attr-defined]
    frame.set_value = set_value  # type: ignore[attr-defined]
    frame.entry = entry  # type: ignore[attr-defined]
    return frame  # type: ignore[return-value]


def check_editor(master: Any = None) -> EditorWidget:
    _require_tk()
    frame = ttk.Frame(master)
    var = tk.BooleanVar(frame)
    widget = ttk.Checkbutton(frame, variable=var)
    widget.pack(side="left")

    def get_value() -> object | None:
        return var.get()

    def set_value(value: object | None) -> None:
        var.set(bool(value))

    frame.get_value = get_value  # type: ignore[attr-defined]
    frame.set_value = set_value  # type: ignore[attr-defined]
    return frame  # type: ignore[return-value]


def choice_editor(choices: Sequence[str], master: Any = None) -> EditorWidget:
    """Read-only drop down over *choices*; no selection reads back as ``None``."""
    _require_tk()
    frame = ttk.Frame(master)
    var = tk.StringVar(frame)
    combo = ttk.Combobox(frame, textvariable=var, values=list(choices), state="readonly")
    combo.pack(side="left", fill="x", expand=True)

    def get_value() -> object | None:
        text = var.get()
        return text if text != "" else None

    def set_value(value: object | None) -> None:
        var.set("" if value is None else str(value))

    frame.get_value = get_value  # type: ignore[attr-defined]
    frame.set_value = set_value  # type: ignore[attr-defined]
    frame.combo = combo  # type: ignore[attr-defined]
    return frame  # type: ignore[return-value]


__all__ = ["EditorWidget", "entry_editor", "check_editor", "choice_editor"]
