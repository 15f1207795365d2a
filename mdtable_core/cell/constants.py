# mdtable_core/cell/constants.py
"""
Cell Module Constants - Patterns and characters used to read table rows

This module defines the Markdown syntax recognized by the cell and row models.
"""
import re


# ============================================================================
# Row Syntax
# ============================================================================

# Column separator
PIPE = "|"

# Escapes the following character (e.g. `\|` is a literal pipe)
ESCAPE = "\\"

# Opens/closes an inline code span; pipes inside a closed span are literal
CODE_SPAN = "`"


# ============================================================================
# Cell Patterns
# ============================================================================

# Delimiter cell: optional colon, one or more hyphens, optional colon,
# surrounded by any amount of whitespace (|---|, | :--: |, |--:| etc.)
DELIMITER_CELL_PATTERN = re.compile(r"\s*:?-+:?\s*")

# Whitespace-only text (row margins)
BLANK_PATTERN = re.compile(r"\s*")

# Alignment marker at either end of a delimiter cell
ALIGNMENT_MARKER = ":"
