"""Worksheet model: zero-based cell storage, protection and autofit."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from xlsxref._errors import RowColumnLimitError
from xlsxref._pixels import column_width_from_pixels, pixel_width
from xlsxref._protection import format_password_hash, hash_password
from xlsxref._sheetname import quote_sheetname, validate_sheetname
from xlsxref._utils import (
    COL_MAX,
    ROW_MAX,
    cell_range,
    cell_to_row_col,
    chart_range_abs,
    row_col_to_cell,
)

if TYPE_CHECKING:
    from xlsxref._workbook import Workbook

logger = logging.getLogger(__name__)

# Extra pixels added to the widest string in a column when autofitting.
AUTOFIT_PADDING = 7


class Worksheet:
    """A single worksheet in a Workbook.

    Cells are keyed by zero-based ``(row, col)``. The sheet only stores
    values; rendering them into the file format belongs to the writer.
    """

    __slots__ = ("_workbook", "_title", "_cells", "_protection_hash", "column_widths")

    def __init__(self, workbook: Workbook, title: str) -> None:
        self._workbook = workbook
        self._title = title
        self._cells: dict[tuple[int, int], Any] = {}
        self._protection_hash: int | None = None
        self.column_widths: dict[int, float] = {}

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        """Rename this worksheet, re-checking name rules and uniqueness."""
        old = self._title
        if old == value:
            return
        validate_sheetname(value, f"Worksheet.title = {value!r}")
        self._workbook._rename_sheet(old, value)  # noqa: SLF001
        self._title = value
        logger.debug("Renamed worksheet %r to %r", old, value)

    @property
    def quoted_title(self) -> str:
        """Title as it must appear in formula text, e.g. ``'Q1 Sales'``."""
        return quote_sheetname(self._title)

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def write(self, row: int, col: int, value: Any) -> None:
        """Store ``value`` at zero-based (row, col). ``None`` clears the cell."""
        self._check_dimensions(row, col)
        if value is None:
            self._cells.pop((row, col), None)
        else:
            self._cells[(row, col)] = value

    def read(self, row: int, col: int) -> Any:
        self._check_dimensions(row, col)
        return self._cells.get((row, col))

    def __getitem__(self, key: str) -> Any:
        """``ws['A1']`` -> stored value or None."""
        row, col = cell_to_row_col(key)
        return self.read(row, col)

    def __setitem__(self, key: str, value: Any) -> None:
        """``ws['A1'] = 42``."""
        row, col = cell_to_row_col(key)
        self.write(row, col, value)

    def iter_cells(self) -> Iterator[tuple[str, Any]]:
        """Yield ``("A1", value)`` pairs in row-major order."""
        for row, col in sorted(self._cells):
            yield row_col_to_cell(row, col), self._cells[(row, col)]

    @staticmethod
    def _check_dimensions(row: int, col: int) -> None:
        if not (0 <= row < ROW_MAX and 0 <= col < COL_MAX):
            raise RowColumnLimitError(f"row={row}, col={col}")

    # ------------------------------------------------------------------
    # References
    # ------------------------------------------------------------------

    @property
    def dimension(self) -> str:
        """Used range as written to the sheet's dimension element ("A1" if empty)."""
        if not self._cells:
            return "A1"
        rows = [r for r, _ in self._cells]
        cols = [c for _, c in self._cells]
        return cell_range(min(rows), min(cols), max(rows), max(cols))

    def range_ref(self, first_row: int, first_col: int, last_row: int, last_col: int) -> str:
        """Sheet-qualified absolute range for charts and defined names."""
        return chart_range_abs(self._title, first_row, first_col, last_row, last_col)

    # ------------------------------------------------------------------
    # Protection
    # ------------------------------------------------------------------

    def protect(self, password: str = "") -> None:
        """Protect the sheet. An empty password protects without a hash."""
        self._protection_hash = hash_password(password)
        logger.debug("Protected worksheet %r (password=%s)", self._title, bool(password))

    def unprotect(self) -> None:
        self._protection_hash = None

    @property
    def protected(self) -> bool:
        return self._protection_hash is not None

    @property
    def protection_hash(self) -> str | None:
        """Hex hash for the ``password`` attribute, or None when not needed."""
        if self._protection_hash is None or self._protection_hash == 0:
            return None
        return format_password_hash(self._protection_hash)

    # ------------------------------------------------------------------
    # Autofit
    # ------------------------------------------------------------------

    @staticmethod
    def _display_text(value: Any) -> str | None:
        if isinstance(value, bool):
            return "TRUE" if value else "FALSE"
        if isinstance(value, str):
            # Formula results are unknown until Excel recalculates.
            return None if value.startswith("=") else value
        return str(value)

    def autofit(self) -> dict[int, float]:
        """Size each used column to its widest value.

        Returns ``{col: width}`` in character units and keeps it in
        ``column_widths``.
        """
        max_pixels: dict[int, int] = {}
        for (_row, col), value in self._cells.items():
            text = self._display_text(value)
            if not text:
                continue
            px = pixel_width(text)
            if px > max_pixels.get(col, 0):
                max_pixels[col] = px

        widths = {
            col: round(column_width_from_pixels(px + AUTOFIT_PADDING), 2)
            for col, px in sorted(max_pixels.items())
        }
        self.column_widths.update(widths)
        logger.debug("Autofit %r: %d column(s)", self._title, len(widths))
        return widths

    def __repr__(self) -> str:
        return f"<Worksheet [{self._title}]>"
