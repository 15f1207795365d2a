"""Tests for TableCell: padding split, delimiters, alignment and offsets."""

import pytest

from mdtable_core.cell import Alignment, TableCell


RAW_SAMPLES = [
    "",
    "foo",
    "  foo  ",
    " foo bar   ",
    "\tfoo\t",
    "   ",
    "\t",
    " :--: ",
    "　全角　",
]


class TestConstruction:
    """Content and padding computed from the raw text."""

    def test_padded_content(self):
        cell = TableCell("  foo  ")
        assert cell.raw_content == "  foo  "
        assert cell.content == "foo"
        assert cell.padding_left == 2
        assert cell.padding_right == 2

    def test_uneven_padding(self):
        cell = TableCell(" foo bar   ")
        assert cell.content == "foo bar"
        assert cell.padding_left == 1
        assert cell.padding_right == 3

    def test_no_padding(self):
        cell = TableCell("foo")
        assert (cell.padding_left, cell.padding_right) == (0, 0)

    def test_empty(self):
        cell = TableCell("")
        assert cell.content == ""
        assert cell.padding_left == 0
        assert cell.padding_right == 0

    def test_whitespace_only_goes_to_right_padding(self):
        cell = TableCell("   ")
        assert cell.content == ""
        assert cell.padding_left == 0
        assert cell.padding_right == 3

    def test_tabs_are_padding(self):
        cell = TableCell("\tfoo\t")
        assert cell.content == "foo"
        assert (cell.padding_left, cell.padding_right) == (1, 1)

    @pytest.mark.parametrize("raw", RAW_SAMPLES)
    def test_padding_adds_up(self, raw):
        cell = TableCell(raw)
        if cell.content == "" and raw != "":
            assert cell.padding_left == 0
            assert cell.padding_right == len(raw)
        else:
            assert cell.padding_left + len(cell.content) + cell.padding_right == len(raw)

    @pytest.mark.parametrize("raw", RAW_SAMPLES)
    def test_to_text_round_trip(self, raw):
        cell = TableCell(raw)
        assert cell.to_text() == raw
        assert TableCell(cell.to_text()) == cell

    def test_immutable(self):
        cell = TableCell("foo")
        with pytest.raises(AttributeError):
            cell.content = "bar"


class TestDelimiter:
    """Delimiter detection and declared alignment."""

    @pytest.mark.parametrize("raw, alignment", [
        (" :--: ", Alignment.CENTER),
        ("--", Alignment.NONE),
        ("-", Alignment.NONE),
        (":--", Alignment.LEFT),
        ("--:", Alignment.RIGHT),
        ("  ---  ", Alignment.NONE),
        ("\t:-:\t", Alignment.CENTER),
    ])
    def test_delimiter_alignment(self, raw, alignment):
        cell = TableCell(raw)
        assert cell.is_delimiter()
        assert cell.get_alignment() == alignment

    @pytest.mark.parametrize("raw", [
        "abc",
        "",
        "   ",
        "::--",
        "--::",
        "- -",
        ":",
        "::",
        "-a-",
    ])
    def test_not_delimiter(self, raw):
        assert not TableCell(raw).is_delimiter()

    def test_non_delimiter_has_no_alignment(self):
        assert TableCell("abc").get_alignment() is None
        assert TableCell("").get_alignment() is None
        assert TableCell("::").get_alignment() is None

    def test_single_colon_is_left(self):
        assert TableCell(":").get_alignment() == Alignment.LEFT
        assert TableCell(" : ").get_alignment() == Alignment.LEFT


class TestOffsets:
    """Mapping between raw and content offsets."""

    def test_padded_cell(self):
        cell = TableCell("  foo  ")
        assert cell.compute_content_offset(0) == 0
        assert cell.compute_content_offset(2) == 0
        assert cell.compute_content_offset(3) == 1
        assert cell.compute_content_offset(5) == 3
        assert cell.compute_content_offset(9) == 3
        assert cell.compute_raw_offset(0) == 2
        assert cell.compute_raw_offset(3) == 5

    def test_empty_content_maps_to_zero(self):
        cell = TableCell("   ")
        for offset in range(5):
            assert cell.compute_content_offset(offset) == 0
        assert cell.compute_raw_offset(0) == 0

    def test_raw_offset_is_not_clamped(self):
        cell = TableCell(" a ")
        assert cell.compute_raw_offset(10) == 11

    @pytest.mark.parametrize("raw", ["  foo  ", "foo", " foo bar   ", "\tx"])
    def test_content_offset_bounds(self, raw):
        cell = TableCell(raw)
        length = len(cell.content)
        for offset in range(len(raw) + 3):
            assert 0 <= cell.compute_content_offset(offset) <= length
        assert cell.compute_content_offset(cell.padding_left) == 0
        assert cell.compute_content_offset(cell.padding_left + length) == length

    @pytest.mark.parametrize("raw", ["  foo  ", "foo", " foo bar   ", "\tx"])
    def test_inverse_consistency(self, raw):
        cell = TableCell(raw)
        for offset in range(len(cell.content) + 1):
            assert cell.compute_content_offset(cell.compute_raw_offset(offset)) == offset

    def test_relocate_cursor_after_repadding(self):
        old = TableCell(" foo ")
        content_offset = old.compute_content_offset(3)
        new = TableCell("    foo ")
        assert new.compute_raw_offset(content_offset) == 6
