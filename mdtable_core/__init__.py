# mdtable_core/__init__.py
"""
mdtable_core Library

Core model for editing single-line, pipe-delimited Markdown table rows.

Package Structure:
- types: Point and Range coordinates shared with host editors
- cell: Cell and row model
    - TableCell: content/padding split, delimiter and alignment detection,
      raw <-> content offset mapping
    - read_row: split a line into a TableRow
- editor: Editor contract
    - BaseTextEditor: capabilities a host editor binding must provide
    - InMemoryTextEditor: list-of-lines binding with transactions and undo

Usage:
    from mdtable_core import TableCell, InMemoryTextEditor, Point

    cell = TableCell("  foo  ")
    cell.compute_content_offset(3)  # 1
"""

__version__ = "0.1.0"

# Expose core classes at top level
from mdtable_core.types import Point, Range
from mdtable_core.cell import Alignment, TableCell, TableRow, read_row
from mdtable_core.editor import (
    BaseTextEditor,
    UnimplementedTextEditor,
    InMemoryTextEditor,
    TextEditorConfig,
)

# Explicit subpackages
from mdtable_core import cell
from mdtable_core import editor

__all__ = [
    "__version__",
    # Coordinates
    "Point",
    "Range",
    # Cell model
    "Alignment",
    "TableCell",
    "TableRow",
    "read_row",
    # Editor contract
    "BaseTextEditor",
    "UnimplementedTextEditor",
    "InMemoryTextEditor",
    "TextEditorConfig",
    # Subpackages
    "cell",
    "editor",
]
