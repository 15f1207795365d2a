# mdtable_core/cell/table_row.py
"""
Table Row - Split one Markdown table line into cells

Main Features:
- Pipe splitting that respects backslash escapes and inline code spans
- Left/right margin detection around the outer pipes
- Mapping a line column to the cell that holds it

Only a single line is handled here; grouping lines into a table is left to
the caller.
"""
import logging
from typing import List, Optional, Sequence, Tuple

from mdtable_core.cell.constants import BLANK_PATTERN, CODE_SPAN, ESCAPE, PIPE
from mdtable_core.cell.table_cell import TableCell

logger = logging.getLogger("mdtable-core")


def _read_code_span(text: str, start: int) -> Tuple[str, int]:
    """
    Read a code span opened by the backtick run at `text[start]`.

    Returns:
        (consumed text, next index). An unclosed span consumes only one
        backtick, which is then treated as a literal character.
    """
    pos = start
    while pos < len(text) and text[pos] == CODE_SPAN:
        pos += 1
    fence = pos - start

    while pos < len(text):
        if text[pos] == CODE_SPAN:
            run_start = pos
            while pos < len(text) and text[pos] == CODE_SPAN:
                pos += 1
            if pos - run_start == fence:
                return text[start:pos], pos
        else:
            pos += 1

    return CODE_SPAN, start + 1


def split_cells(text: str) -> List[str]:
    """
    Split a line on unescaped pipes.

    Pipes escaped with a backslash or inside a closed code span are kept as
    part of the cell text. Escapes are not removed.

    Args:
        text: One line of text

    Returns:
        Raw chunks between pipes (always at least one element)
    """
    chunks: List[str] = []
    buf: List[str] = []
    pos = 0

    while pos < len(text):
        char = text[pos]
        if char == CODE_SPAN:
            span, pos = _read_code_span(text, pos)
            buf.append(span)
        elif char == ESCAPE:
            buf.append(text[pos:pos + 2])
            pos += 2
        elif char == PIPE:
            chunks.append("".join(buf))
            buf = []
            pos += 1
        else:
            buf.append(char)
            pos += 1

    chunks.append("".join(buf))
    return chunks


class TableRow:
    """
    A table row: cells plus the text outside the outermost pipes.

    Attributes:
        margin_left: Whitespace before the first pipe
        margin_right: Whitespace after the last pipe
    """

    def __init__(
        self,
        cells: Sequence[TableCell],
        margin_left: str = "",
        margin_right: str = "",
    ):
        self._cells = list(cells)
        self.margin_left = margin_left
        self.margin_right = margin_right

    def __repr__(self) -> str:
        return f"TableRow({self.to_text()!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, TableRow):
            return NotImplemented
        return (
            self._cells == other._cells
            and self.margin_left == other.margin_left
            and self.margin_right == other.margin_right
        )

    def get_width(self) -> int:
        """Number of cells in the row."""
        return len(self._cells)

    def get_cells(self) -> List[TableCell]:
        """Return a copy of the cell list."""
        return list(self._cells)

    def get_cell_at(self, index: int) -> Optional[TableCell]:
        """Return the cell at `index`, or None if out of range."""
        if 0 <= index < len(self._cells):
            return self._cells[index]
        return None

    def to_text(self) -> str:
        """Render the row back into one line."""
        if not self._cells:
            return self.margin_left
        cells = PIPE.join(cell.to_text() for cell in self._cells)
        return f"{self.margin_left}{PIPE}{cells}{PIPE}{self.margin_right}"

    def is_delimiter(self) -> bool:
        """True if the row has cells and every cell is a delimiter."""
        return bool(self._cells) and all(cell.is_delimiter() for cell in self._cells)

    def compute_cell_index(self, column: int) -> int:
        """
        Find the cell that holds a column of the rendered line.

        A column right before a pipe belongs to the cell on its left.

        Args:
            column: Character position in to_text()

        Returns:
            -1 if the column is at or before the first pipe, get_width() if
            it is past the last pipe, otherwise the cell index
        """
        return self._locate(column)[0]

    def compute_cell_offset(self, column: int) -> int:
        """
        Compute the offset of a column inside the cell that holds it.

        For -1 the offset is relative to the line start; for get_width() it
        is relative to the character after the last pipe.
        """
        return self._locate(column)[1]

    def _locate(self, column: int) -> Tuple[int, int]:
        if column <= len(self.margin_left):
            return -1, column

        start = len(self.margin_left) + 1
        for index, cell in enumerate(self._cells):
            end = start + len(cell.raw_content)
            if column <= end:
                return index, column - start
            start = end + 1

        return len(self._cells), column - start


def read_row(text: str) -> TableRow:
    """
    Read one line as a table row.

    The first chunk becomes the left margin when it is blank (this includes
    a line that starts with a pipe). The last chunk becomes the right margin
    when it is blank and at least two chunks remain.

    Args:
        text: One line of text

    Returns:
        TableRow
    """
    chunks = split_cells(text)

    margin_left = ""
    if chunks and BLANK_PATTERN.fullmatch(chunks[0]):
        margin_left = chunks.pop(0)

    margin_right = ""
    if len(chunks) > 1 and BLANK_PATTERN.fullmatch(chunks[-1]):
        margin_right = chunks.pop()

    row = TableRow([TableCell(chunk) for chunk in chunks], margin_left, margin_right)
    logger.debug(f"Read table row with {row.get_width()} cells")
    return row


__all__ = [
    "TableRow",
    "split_cells",
    "read_row",
]
