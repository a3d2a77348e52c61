from .widgets import EditorWidget, check_editor, choice_editor, entry_editor

__all__ = ["EditorWidget", "check_editor", "choice_editor", "entry_editor"]
