# mdtable_core/editor/memory_editor.py
"""
In-Memory Text Editor - A BaseTextEditor over a list of lines

A complete binding that keeps the whole buffer in memory. Useful for running
a table formatter outside an editor (scripts, tests) and as a worked example
for host bindings.

================================================================================
TRANSACTIONS AND HISTORY
================================================================================

Every edit outside transact() is its own undo step. Edits inside transact()
share one step, and nested transact() calls join the outermost one.

If the callback raises (any exception, KeyboardInterrupt included), the buffer, cursor and selection are restored to the
state they had when the outermost transaction started (when
config.rollback_on_error is set) and the exception is re-raised. Without
rollback, the edits made so far are kept and recorded as one step.

    editor = InMemoryTextEditor(["| a | b |", "|---|---|"])

    def reformat():
        editor.replace_lines(0, 2, ["| a   | b   |", "| --- | --- |"])
        editor.set_cursor_position(Point(0, 2))

    editor.transact(reformat)
    editor.undo()   # both lines restored in one step
================================================================================
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, List, Optional, Sequence, Set, Tuple

from mdtable_core.editor.text_editor import BaseTextEditor
from mdtable_core.types import Point, Range


class TextEditorError(Exception):
    """Base error for invalid requests to an in-memory editor."""


class EditorRangeError(TextEditorError, IndexError):
    """Raised when a row or point lies outside the buffer."""


class ReadOnlyRowError(TextEditorError):
    """Raised when an edit touches a row that does not accept table edits."""

    def __init__(self, row: int):
        super().__init__(f"Row {row} is read-only")
        self.row = row


@dataclass
class TextEditorConfig:
    """Configuration for InMemoryTextEditor.

    Attributes:
        read_only_rows: Rows that reject table edits. Indices are read at
            construction; the editor keeps its own copy and shifts it as
            lines are inserted or deleted, so a protected line stays protected
        rollback_on_error: Restore the buffer when a transaction callback raises
        max_history: Maximum number of undo steps kept
        line_separator: Separator used by from_text()/get_text()
    """
    read_only_rows: Set[int] = field(default_factory=set)
    rollback_on_error: bool = True
    max_history: int = 100
    line_separator: str = "\n"


@dataclass(frozen=True)
class EditorSnapshot:
    """Buffer state saved for undo/redo and rollback."""
    lines: Tuple[str, ...]
    cursor: Point
    selection: Optional[Range]
    read_only_rows: FrozenSet[int] = frozenset()


class InMemoryTextEditor(BaseTextEditor):
    """
    Text editor holding its lines in a Python list.

    The buffer always has at least one (possibly empty) line.
    """

    def __init__(
        self,
        lines: Optional[Sequence[str]] = None,
        config: Optional[TextEditorConfig] = None,
    ):
        self.config = config or TextEditorConfig()
        self.logger = logging.getLogger("mdtable-core")

        self._lines: List[str] = list(lines) if lines else [""]
        self._cursor = Point(0, 0)
        self._selection: Optional[Range] = None
        self._read_only_rows: Set[int] = set(self.config.read_only_rows)

        self._undo_stack: List[EditorSnapshot] = []
        self._redo_stack: List[EditorSnapshot] = []
        self._transaction_depth = 0
        self._transaction_dirty = False

    @classmethod
    def from_text(
        cls,
        text: str,
        config: Optional[TextEditorConfig] = None,
    ) -> "InMemoryTextEditor":
        """Create an editor from text, splitting on config.line_separator."""
        config = config or TextEditorConfig()
        return cls(text.split(config.line_separator), config)

    def get_text(self) -> str:
        """Return the whole buffer joined with config.line_separator."""
        return self.config.line_separator.join(self._lines)

    def get_lines(self) -> List[str]:
        """Return a copy of all lines."""
        return list(self._lines)

    # ==========================================================================
    # Cursor and selection
    # ==========================================================================

    def get_cursor_position(self) -> Point:
        return self._cursor

    def set_cursor_position(self, pos: Point) -> None:
        """Move the cursor and clear the selection."""
        self._check_point(pos)
        self._cursor = pos
        self._selection = None

    def set_selection_range(self, range: Range) -> None:
        """Select `range`; the cursor moves to its end."""
        self._check_point(range.start)
        self._check_point(range.end)
        self._selection = range
        self._cursor = range.end

    def get_selection_range(self) -> Optional[Range]:
        return self._selection

    # ==========================================================================
    # Line access
    # ==========================================================================

    def get_last_row(self) -> int:
        return len(self._lines) - 1

    def accepts_table_edit(self, row: int) -> bool:
        return 0 <= row < len(self._lines) and row not in self._read_only_rows

    def get_line(self, row: int) -> str:
        self._check_row(row)
        return self._lines[row]

    def insert_line(self, row: int, line: str) -> None:
        self._check_row(row, allow_end=True)
        self._record_edit()
        self._lines.insert(row, line)
        self._shift_read_only_rows(row, 1)
        self._clamp_cursor()

    def delete_line(self, row: int) -> None:
        self._check_row(row)
        self._check_writable(row, row + 1)
        self._record_edit()
        del self._lines[row]
        self._shift_read_only_rows(row + 1, -1)
        if not self._lines:
            self._lines.append("")
        self._clamp_cursor()

    def replace_lines(self, start_row: int, end_row: int, lines: Sequence[str]) -> None:
        self._check_row(start_row, allow_end=True)
        self._check_row(end_row, allow_end=True)
        if end_row < start_row:
            raise EditorRangeError(f"End row {end_row} is before start row {start_row}")
        self._check_writable(start_row, end_row)
        self._record_edit()
        new_lines = list(lines)
        self._lines[start_row:end_row] = new_lines
        self._shift_read_only_rows(end_row, len(new_lines) - (end_row - start_row))
        if not self._lines:
            self._lines.append("")
        self._clamp_cursor()

    # ==========================================================================
    # Transactions and history
    # ==========================================================================

    def transact(self, func: Callable[[], None]) -> None:
        """
        Run `func` as one undoable step.

        Nested calls join the outermost transaction. On error the outermost
        transaction rolls back (see config.rollback_on_error) and re-raises.
        """
        outermost = self._transaction_depth == 0
        if outermost:
            snapshot = self._snapshot()
            self._transaction_dirty = False

        self._transaction_depth += 1
        failed = True
        try:
            func()
            failed = False
        finally:
            self._transaction_depth -= 1
            if outermost:
                self._finish_transaction(snapshot, failed)

    def undo(self) -> bool:
        """
        Revert the last undo step.

        Returns:
            True if a step was undone, False if the history is empty
        """
        self._check_not_in_transaction("undo")
        if not self._undo_stack:
            return False
        self._redo_stack.append(self._snapshot())
        self._restore(self._undo_stack.pop())
        return True

    def redo(self) -> bool:
        """
        Re-apply the last undone step.

        Returns:
            True if a step was redone, False if there is nothing to redo
        """
        self._check_not_in_transaction("redo")
        if not self._redo_stack:
            return False
        self._undo_stack.append(self._snapshot())
        self._restore(self._redo_stack.pop())
        return True

    def _finish_transaction(self, snapshot: EditorSnapshot, failed: bool) -> None:
        if failed and self.config.rollback_on_error:
            self.logger.warning("Transaction failed, rolling back buffer")
            self._restore(snapshot)
            return
        if not self._transaction_dirty:
            return
        self._push_history(snapshot)
        self.logger.debug(f"Committed transaction ({len(self._lines)} lines)")

    def _record_edit(self) -> None:
        if self._transaction_depth > 0:
            self._transaction_dirty = True
            return
        self._push_history(self._snapshot())

    def _push_history(self, snapshot: EditorSnapshot) -> None:
        self._undo_stack.append(snapshot)
        if len(self._undo_stack) > self.config.max_history:
            del self._undo_stack[0]
        self._redo_stack.clear()

    def _snapshot(self) -> EditorSnapshot:
        return EditorSnapshot(
            tuple(self._lines),
            self._cursor,
            self._selection,
            frozenset(self._read_only_rows),
        )

    def _restore(self, snapshot: EditorSnapshot) -> None:
        self._lines = list(snapshot.lines)
        self._cursor = snapshot.cursor
        self._selection = snapshot.selection
        self._read_only_rows = set(snapshot.read_only_rows)

    def _shift_read_only_rows(self, from_row: int, delta: int) -> None:
        if delta == 0:
            return
        self._read_only_rows = {
            row + delta if row >= from_row else row for row in self._read_only_rows
        }

    # ==========================================================================
    # Validation
    # ==========================================================================

    def _check_row(self, row: int, allow_end: bool = False) -> None:
        limit = len(self._lines) if allow_end else len(self._lines) - 1
        if not 0 <= row <= limit:
            raise EditorRangeError(f"Row {row} is out of range [0, {limit}]")

    def _check_point(self, pos: Point) -> None:
        self._check_row(pos.row)
        width = len(self._lines[pos.row])
        if not 0 <= pos.column <= width:
            raise EditorRangeError(
                f"Column {pos.column} is out of range [0, {width}] on row {pos.row}"
            )

    def _check_writable(self, start_row: int, end_row: int) -> None:
        for row in range(start_row, end_row):
            if row in self._read_only_rows:
                raise ReadOnlyRowError(row)

    def _check_not_in_transaction(self, operation: str) -> None:
        if self._transaction_depth > 0:
            raise TextEditorError(f"Cannot {operation} inside a transaction")

    def _clamp_cursor(self) -> None:
        row = min(self._cursor.row, len(self._lines) - 1)
        column = min(self._cursor.column, len(self._lines[row]))
        self._cursor = Point(row, column)

        if self._selection is not None and not (
            self._is_valid_point(self._selection.start)
            and self._is_valid_point(self._selection.end)
        ):
            self._selection = None

    def _is_valid_point(self, pos: Point) -> bool:
        return 0 <= pos.row < len(self._lines) and 0 <= pos.column <= len(self._lines[pos.row])


# Default configuration
DEFAULT_EDITOR_CONFIG = TextEditorConfig()


__all__ = [
    "TextEditorError",
    "EditorRangeError",
    "ReadOnlyRowError",
    "TextEditorConfig",
    "EditorSnapshot",
    "InMemoryTextEditor",
    "DEFAULT_EDITOR_CONFIG",
]
