# mdtable_core/editor/__init__.py
"""
Editor - Contract between a table formatter and the host text editor

Module Structure:
- text_editor: BaseTextEditor (abstract contract), UnimplementedTextEditor
- memory_editor: InMemoryTextEditor (list-of-lines binding with undo)

Usage:
    from mdtable_core.editor import BaseTextEditor, InMemoryTextEditor
"""

from mdtable_core.editor.text_editor import (
    BaseTextEditor,
    UnimplementedTextEditor,
)

from mdtable_core.editor.memory_editor import (
    TextEditorError,
    EditorRangeError,
    ReadOnlyRowError,
    TextEditorConfig,
    EditorSnapshot,
    InMemoryTextEditor,
    DEFAULT_EDITOR_CONFIG,
)

__all__ = [
    # Contract
    "BaseTextEditor",
    "UnimplementedTextEditor",
    # In-memory binding
    "TextEditorError",
    "EditorRangeError",
    "ReadOnlyRowError",
    "TextEditorConfig",
    "EditorSnapshot",
    "InMemoryTextEditor",
    "DEFAULT_EDITOR_CONFIG",
]
