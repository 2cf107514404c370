"""Workbook — ordered collection of uniquely named worksheets.

Sheet names are validated with Excel's rules on creation and rename, and
compared case-insensitively for uniqueness as Excel does.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from xlsxref._errors import SheetnameReused
from xlsxref._sheetname import validate_sheetname
from xlsxref._worksheet import Worksheet

logger = logging.getLogger(__name__)


class Workbook:
    """In-memory workbook holding Worksheet objects in tab order."""

    def __init__(self) -> None:
        """Create a workbook with a single default 'Sheet1'."""
        self._sheet_names: list[str] = []
        self._sheets: dict[str, Worksheet] = {}
        self.create_sheet()

    # ------------------------------------------------------------------
    # Sheet access
    # ------------------------------------------------------------------

    @property
    def sheetnames(self) -> list[str]:
        return list(self._sheet_names)

    @property
    def active(self) -> Worksheet | None:
        """Return the first sheet, or None if no sheets exist."""
        if self._sheet_names:
            return self._sheets[self._sheet_names[0]]
        return None

    def __getitem__(self, name: str) -> Worksheet:
        if name not in self._sheets:
            raise KeyError(f"Worksheet '{name}' does not exist")
        return self._sheets[name]

    def __contains__(self, name: str) -> bool:
        return name in self._sheets

    def __iter__(self) -> Iterator[Worksheet]:
        return (self._sheets[name] for name in self._sheet_names)

    def __len__(self) -> int:
        return len(self._sheet_names)

    # ------------------------------------------------------------------
    # Sheet management
    # ------------------------------------------------------------------

    def _default_name(self) -> str:
        n = len(self._sheet_names) + 1
        while self._find(f"Sheet{n}") is not None:
            n += 1
        return f"Sheet{n}"

    def _find(self, name: str) -> str | None:
        folded = name.casefold()
        for existing in self._sheet_names:
            if existing.casefold() == folded:
                return existing
        return None

    def create_sheet(self, title: str | None = None) -> Worksheet:
        """Append a new sheet. Without a title the next free "SheetN" is used."""
        if title is None:
            title = self._default_name()
        validate_sheetname(title, f"create_sheet({title!r})")
        if self._find(title) is not None:
            raise SheetnameReused(f"create_sheet({title!r})")

        ws = Worksheet(self, title)
        self._sheet_names.append(title)
        self._sheets[title] = ws
        logger.debug("Created worksheet %r", title)
        return ws

    def remove(self, worksheet: Worksheet) -> None:
        """Remove a sheet from the workbook."""
        name = worksheet.title
        if self._sheets.get(name) is not worksheet:
            raise KeyError(f"Worksheet '{name}' does not exist")
        self._sheet_names.remove(name)
        del self._sheets[name]

    def _rename_sheet(self, old: str, new: str) -> None:
        """Called by Worksheet.title; ``new`` is already validated."""
        existing = self._find(new)
        if existing is not None and existing != old:
            raise SheetnameReused(f"Worksheet.title = {new!r}")
        idx = self._sheet_names.index(old)
        self._sheet_names[idx] = new
        self._sheets[new] = self._sheets.pop(old)

    def __repr__(self) -> str:
        return f"<Workbook sheets={self._sheet_names}>"
