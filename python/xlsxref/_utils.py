"""Coordinate helpers: column letters, A1 cell references and ranges.

All row and column numbers are zero-based. Formatting functions accept any
non-negative ints; checking against the format limits (``ROW_MAX`` and
``COL_MAX``) is left to the caller.
"""

from __future__ import annotations

import re

from xlsxref._errors import InvalidCellReference
from xlsxref._sheetname import quote_sheetname

# Exclusive upper bounds for zero-based rows and columns ("XFD1048576").
ROW_MAX = 1_048_576
COL_MAX = 16_384

# ---------------------------------------------------------------------------
# Regex patterns for A1 references
# ---------------------------------------------------------------------------

_SHEET_PREFIX = r"(?:'(?:[^']|'')+'|[^'!:]+)!"
_CELL_REF = r"\$?([A-Za-z]{1,3})\$?([0-9]+)"
_CELL_RE = re.compile(rf"^{_CELL_REF}$")
_RANGE_RE = re.compile(rf"^(?:{_SHEET_PREFIX})?{_CELL_REF}(?::{_CELL_REF})?$")


# ---------------------------------------------------------------------------
# Column codec
# ---------------------------------------------------------------------------


def column_number_to_name(col_num: int) -> str:
    """Convert a zero-based column number to letters: 0 -> "A", 702 -> "AAA"."""
    col_name = ""
    col_num += 1

    while col_num > 0:
        # Remainder in 1..26; there is no letter for zero.
        remainder = col_num % 26
        if remainder == 0:
            remainder = 26

        col_name = chr(64 + remainder) + col_name
        col_num = (col_num - 1) // 26

    return col_name


def column_name_to_number(column: str) -> int:
    """Convert column letters to a zero-based column number: "AAA" -> 702.

    ``column`` must be uppercase A-Z. It is not validated; use
    ``cell_to_row_col`` for untrusted input.
    """
    col_num = 0
    for char in column:
        col_num = col_num * 26 + (ord(char) - ord("A") + 1)
    return col_num - 1


# ---------------------------------------------------------------------------
# Cell and range formatting
# ---------------------------------------------------------------------------


def row_col_to_cell(row_num: int, col_num: int) -> str:
    """(0, 0) -> "A1", (1, 1) -> "B2"."""
    return f"{column_number_to_name(col_num)}{row_num + 1}"


def row_col_to_cell_absolute(row_num: int, col_num: int) -> str:
    """(0, 0) -> "$A$1", (1, 1) -> "$B$2"."""
    return f"${column_number_to_name(col_num)}${row_num + 1}"


def cell_range(first_row: int, first_col: int, last_row: int, last_col: int) -> str:
    """Format an ``A1:B1`` style range.

    A range whose endpoints format to the same cell collapses to that cell,
    so ``cell_range(0, 0, 0, 0) == "A1"``.
    """
    range1 = row_col_to_cell(first_row, first_col)
    range2 = row_col_to_cell(last_row, last_col)

    if range1 == range2:
        return range1
    return f"{range1}:{range2}"


def cell_range_absolute(
    first_row: int, first_col: int, last_row: int, last_col: int
) -> str:
    """Format an absolute ``$A$1:$B$1`` style range, collapsing single cells."""
    range1 = row_col_to_cell_absolute(first_row, first_col)
    range2 = row_col_to_cell_absolute(last_row, last_col)

    if range1 == range2:
        return range1
    return f"{range1}:{range2}"


def chart_range_abs(
    sheet_name: str, first_row: int, first_col: int, last_row: int, last_col: int
) -> str:
    """Format a sheet-qualified absolute range such as ``'My Data'!$A$1:$B$4``."""
    sheet_name = quote_sheetname(sheet_name)
    cells = cell_range_absolute(first_row, first_col, last_row, last_col)
    return f"{sheet_name}!{cells}"


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _to_row_col(col_str: str, row_str: str, ref: str) -> tuple[int, int]:
    row = int(row_str)
    if row < 1:
        raise InvalidCellReference(repr(ref))
    return row - 1, column_name_to_number(col_str.upper())


def cell_to_row_col(cell: str) -> tuple[int, int]:
    """Parse "B3", "$B$3" or "b3" into zero-based ``(row, col)`` = (2, 1)."""
    m = _CELL_RE.match(cell.strip())
    if m is None:
        raise InvalidCellReference(repr(cell))
    return _to_row_col(m.group(1), m.group(2), cell)


def range_to_row_col(range_ref: str) -> tuple[int, int, int, int]:
    """Parse "A1:B5" into ``(first_row, first_col, last_row, last_col)``.

    A single cell gives a range with identical endpoints. A ``Sheet1!`` or
    ``'My Sheet'!`` prefix is accepted and ignored.
    """
    m = _RANGE_RE.match(range_ref.strip())
    if m is None:
        raise InvalidCellReference(repr(range_ref))

    first_row, first_col = _to_row_col(m.group(1), m.group(2), range_ref)
    if m.group(3) is None:
        return first_row, first_col, first_row, first_col

    last_row, last_col = _to_row_col(m.group(3), m.group(4), range_ref)
    return first_row, first_col, last_row, last_col


# ---------------------------------------------------------------------------
# Misc serialization helpers
# ---------------------------------------------------------------------------


def formula_to_string(formula: str) -> str:
    """Strip one leading "=" from a formula; the file format stores it bare."""
    if formula.startswith("="):
        return formula[1:]
    return formula


def to_xml_bool(value: bool) -> str:
    return "1" if value else "0"
