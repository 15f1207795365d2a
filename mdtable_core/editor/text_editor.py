# mdtable_core/editor/text_editor.py
"""
Text Editor - Abstract Interface for Host Editor Bindings

Defines the capabilities a text-editing surface must provide so that a table
formatter can read and rewrite table rows without depending on any concrete
editor.

================================================================================
CAPABILITIES
================================================================================

| Group      | Method                | Purpose                                  |
|------------|-----------------------|------------------------------------------|
| Cursor     | get_cursor_position() | Current cursor as a Point                |
|            | set_cursor_position() | Move the cursor                          |
|            | set_selection_range() | Select a half-open Range                 |
| Lines      | get_last_row()        | Index of the final line (0-based)        |
|            | accepts_table_edit()  | May the formatter rewrite this row?      |
|            | get_line()            | Read one line                            |
|            | insert_line()         | Insert a line, shifting the rest down    |
|            | delete_line()         | Remove a line, shifting the rest up      |
|            | replace_lines()       | Replace rows [start_row, end_row)        |
| Grouping   | transact()            | Run edits as one undoable step           |

================================================================================
IMPLEMENTATION GUIDE
================================================================================

Host bindings subclass BaseTextEditor and implement every method. A binding
that cannot support table editing should decline explicitly (for example by
returning False from accepts_table_edit()) rather than leave methods out.

transact() only defines grouping. Whether edits made before an exception in
the callback are rolled back is up to each binding and must be documented
there.

UnimplementedTextEditor is the reference implementation used to document and
test the contract: every method raises NotImplementedError.

Example:

    class MyEditorBinding(BaseTextEditor):
        def get_line(self, row):
            return self._view.line_text(row)
        ...
================================================================================
"""
from abc import ABC, abstractmethod
from typing import Callable, Sequence

from mdtable_core.types import Point, Range


class BaseTextEditor(ABC):
    """Abstract base class for host editor bindings."""

    # ==========================================================================
    # Cursor and selection
    # ==========================================================================

    @abstractmethod
    def get_cursor_position(self) -> Point:
        """
        Get the current cursor position.

        Returns:
            Point in the host buffer's coordinates
        """
        pass

    @abstractmethod
    def set_cursor_position(self, pos: Point) -> None:
        """
        Move the cursor.

        Args:
            pos: New cursor position
        """
        pass

    @abstractmethod
    def set_selection_range(self, range: Range) -> None:
        """
        Set the active selection.

        Args:
            range: Half-open span to select
        """
        pass

    # ==========================================================================
    # Line access
    # ==========================================================================

    @abstractmethod
    def get_last_row(self) -> int:
        """
        Get the index of the last line in the buffer.

        Returns:
            0-based row index
        """
        pass

    @abstractmethod
    def accepts_table_edit(self, row: int) -> bool:
        """
        Check whether the formatter may rewrite a row.

        The formatter must skip a row (or abort) instead of writing when this
        returns False.

        Args:
            row: Row index

        Returns:
            True if the row may be edited
        """
        pass

    @abstractmethod
    def get_line(self, row: int) -> str:
        """
        Read the full text of a line.

        Args:
            row: Row index

        Returns:
            Line text without the line terminator
        """
        pass

    @abstractmethod
    def insert_line(self, row: int, line: str) -> None:
        """
        Insert a line. Lines at and after `row` shift down by one.

        Args:
            row: Row index of the new line
            line: Line text
        """
        pass

    @abstractmethod
    def delete_line(self, row: int) -> None:
        """
        Delete a line. Following lines shift up by one.

        Args:
            row: Row index
        """
        pass

    @abstractmethod
    def replace_lines(self, start_row: int, end_row: int, lines: Sequence[str]) -> None:
        """
        Replace rows [start_row, end_row) with `lines`.

        The number of new lines may differ from the number replaced; the
        change is reflected in later get_last_row() results.

        Args:
            start_row: First row to replace
            end_row: Row after the last one to replace
            lines: Replacement lines
        """
        pass

    # ==========================================================================
    # Grouping
    # ==========================================================================

    @abstractmethod
    def transact(self, func: Callable[[], None]) -> None:
        """
        Run `func` so that the edits it makes form one undoable step.

        Args:
            func: Callback performing zero or more edits
        """
        pass


class UnimplementedTextEditor(BaseTextEditor):
    """
    Reference text editor with no host behind it.

    Every method raises NotImplementedError, so an incomplete binding or a
    formatter wired to this editor fails loudly instead of editing nothing.
    """

    def _not_implemented(self, method: str) -> NotImplementedError:
        return NotImplementedError(f"{self.__class__.__name__}.{method}() is not implemented")

    def get_cursor_position(self) -> Point:
        raise self._not_implemented("get_cursor_position")

    def set_cursor_position(self, pos: Point) -> None:
        raise self._not_implemented("set_cursor_position")

    def set_selection_range(self, range: Range) -> None:
        raise self._not_implemented("set_selection_range")

    def get_last_row(self) -> int:
        raise self._not_implemented("get_last_row")

    def accepts_table_edit(self, row: int) -> bool:
        raise self._not_implemented("accepts_table_edit")

    def get_line(self, row: int) -> str:
        raise self._not_implemented("get_line")

    def insert_line(self, row: int, line: str) -> None:
        raise self._not_implemented("insert_line")

    def delete_line(self, row: int) -> None:
        raise self._not_implemented("delete_line")

    def replace_lines(self, start_row: int, end_row: int, lines: Sequence[str]) -> None:
        raise self._not_implemented("replace_lines")

    def transact(self, func: Callable[[], None]) -> None:
        """Run `func` without grouping, then report that grouping is missing."""
        func()
        raise self._not_implemented("transact")


__all__ = [
    "BaseTextEditor",
    "UnimplementedTextEditor",
]
