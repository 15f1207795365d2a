# mdtable_core/cell/table_cell.py
"""
Table Cell - One pipe-delimited segment of a table row

A TableCell splits the raw text between two pipes into trimmed content and
the whitespace padding around it, and translates cursor offsets between the
two coordinate systems.

================================================================================
PADDING LAYOUT
================================================================================

    raw_content:  "  foo   "
                   ^^   ^^^
                   |     +-- padding_right = 3
                   +-------- padding_left  = 2
    content:        "foo"

A whitespace-only cell has no content; all of its whitespace is reported as
right padding so that the cell keeps a single insertion point at column 0:

    raw_content:  "   "  ->  content = "", padding_left = 0, padding_right = 3

================================================================================
OFFSET MAPPING
================================================================================

compute_content_offset(raw_offset)   raw -> content, clamped to [0, len(content)]
compute_raw_offset(content_offset)   content -> raw, not clamped

A formatter reads the cursor's content offset before rewriting a row, then
places the cursor with compute_raw_offset() on the cell built from the new
text.
================================================================================
"""
from dataclasses import dataclass, field
from typing import Optional

from mdtable_core.cell.alignment import Alignment
from mdtable_core.cell.constants import ALIGNMENT_MARKER, DELIMITER_CELL_PATTERN


@dataclass(frozen=True)
class TableCell:
    """Immutable view of a raw cell string.

    Attributes:
        raw_content: Cell text exactly as captured from the line
        content: raw_content without leading/trailing whitespace
        padding_left: Width of the whitespace before content
        padding_right: Width of the whitespace after content
    """
    raw_content: str
    content: str = field(init=False)
    padding_left: int = field(init=False)
    padding_right: int = field(init=False)

    def __post_init__(self):
        content = self.raw_content.strip()
        if content == "":
            padding_left = 0
        else:
            padding_left = len(self.raw_content) - len(self.raw_content.lstrip())
        padding_right = len(self.raw_content) - len(content) - padding_left

        object.__setattr__(self, "content", content)
        object.__setattr__(self, "padding_left", padding_left)
        object.__setattr__(self, "padding_right", padding_right)

    def to_text(self) -> str:
        """Return the raw content of the cell."""
        return self.raw_content

    def is_delimiter(self) -> bool:
        """
        Check if the cell is a delimiter, i.e. it contains only hyphens with
        one optional leading and one optional trailing colon.

        Returns:
            True if the cell is a delimiter
        """
        return DELIMITER_CELL_PATTERN.fullmatch(self.raw_content) is not None

    def get_alignment(self) -> Optional[Alignment]:
        """
        Return the alignment the cell declares.

        The leading colon is checked first, so a lone ":" reports LEFT.

        Returns:
            Alignment, or None if the cell is not a delimiter
        """
        if not self.is_delimiter() and self.content != ALIGNMENT_MARKER:
            return None
        if self.content.startswith(ALIGNMENT_MARKER):
            if len(self.content) > 1 and self.content.endswith(ALIGNMENT_MARKER):
                return Alignment.CENTER
            return Alignment.LEFT
        if self.content.endswith(ALIGNMENT_MARKER):
            return Alignment.RIGHT
        return Alignment.NONE

    def compute_content_offset(self, raw_offset: int) -> int:
        """
        Compute a position in the trimmed content from one in the raw content.

        Offsets inside the left padding map to the start of the content, and
        offsets inside the right padding (or beyond) map to its end.

        Args:
            raw_offset: Position relative to the start of raw_content

        Returns:
            Position relative to the start of content
        """
        if self.content == "":
            return 0
        if raw_offset < self.padding_left:
            return 0
        if raw_offset < self.padding_left + len(self.content):
            return raw_offset - self.padding_left
        return len(self.content)

    def compute_raw_offset(self, content_offset: int) -> int:
        """
        Compute a position in the raw content from one in the trimmed content.

        Args:
            content_offset: Position relative to the start of content

        Returns:
            Position relative to the start of raw_content
        """
        return content_offset + self.padding_left


__all__ = [
    "TableCell",
]
