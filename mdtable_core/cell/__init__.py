# mdtable_core/cell/__init__.py
"""
Cell - Table cell and row model

Module Structure:
- alignment: Alignment enum declared by delimiter cells
- constants: Row syntax characters and cell patterns
- table_cell: TableCell (content/padding split, offset mapping)
- table_row: Pipe splitting and TableRow

Usage:
    from mdtable_core.cell import TableCell, Alignment, read_row

    cell = TableCell(" :--: ")
    cell.get_alignment()  # Alignment.CENTER
"""

from mdtable_core.cell.alignment import Alignment

from mdtable_core.cell.constants import (
    PIPE,
    ESCAPE,
    CODE_SPAN,
    DELIMITER_CELL_PATTERN,
)

from mdtable_core.cell.table_cell import TableCell

from mdtable_core.cell.table_row import (
    TableRow,
    split_cells,
    read_row,
)

__all__ = [
    # alignment
    "Alignment",
    # constants
    "PIPE",
    "ESCAPE",
    "CODE_SPAN",
    "DELIMITER_CELL_PATTERN",
    # table_cell
    "TableCell",
    # table_row
    "TableRow",
    "split_cells",
    "read_row",
]
