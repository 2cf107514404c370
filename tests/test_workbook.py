"""Tests for the Workbook / Worksheet model."""

from __future__ import annotations

import pytest

from xlsxref import (
    ROW_MAX,
    InvalidCellReference,
    RowColumnLimitError,
    SheetnameCannotBeBlank,
    SheetnameContainsInvalidCharacter,
    SheetnameLengthExceeded,
    SheetnameReused,
    Workbook,
    Worksheet,
)


class TestWorkbookSheets:
    def test_default_sheet(self) -> None:
        wb = Workbook()
        assert wb.sheetnames == ["Sheet1"]
        assert isinstance(wb.active, Worksheet)
        assert wb.active.title == "Sheet1"

    def test_create_sheet_default_names(self) -> None:
        wb = Workbook()
        ws = wb.create_sheet()
        assert ws.title == "Sheet2"
        assert wb.sheetnames == ["Sheet1", "Sheet2"]
        assert len(wb) == 2

    def test_create_named_sheet(self) -> None:
        wb = Workbook()
        ws = wb.create_sheet("Q1 Sales")
        assert "Q1 Sales" in wb
        assert wb["Q1 Sales"] is ws
        assert [s.title for s in wb] == ["Sheet1", "Q1 Sales"]

    def test_duplicate_name_case_insensitive(self) -> None:
        wb = Workbook()
        with pytest.raises(SheetnameReused, match="already in use"):
            wb.create_sheet("SHEET1")

    def test_invalid_names_rejected(self) -> None:
        wb = Workbook()
        with pytest.raises(SheetnameCannotBeBlank):
            wb.create_sheet("")
        with pytest.raises(SheetnameContainsInvalidCharacter):
            wb.create_sheet("Bad/Name")
        with pytest.raises(SheetnameLengthExceeded):
            wb.create_sheet("x" * 32)
        assert wb.sheetnames == ["Sheet1"]

    def test_error_context_names_call(self) -> None:
        wb = Workbook()
        with pytest.raises(SheetnameContainsInvalidCharacter) as exc_info:
            wb.create_sheet("a?b")
        assert exc_info.value.message == "create_sheet('a?b')"

    def test_missing_sheet(self) -> None:
        wb = Workbook()
        with pytest.raises(KeyError):
            wb["Nope"]

    def test_remove_then_default_name_skips_taken(self) -> None:
        wb = Workbook()
        wb.create_sheet()
        wb.remove(wb["Sheet1"])
        assert wb.sheetnames == ["Sheet2"]
        assert wb.create_sheet().title == "Sheet3"

    def test_remove_foreign_sheet(self) -> None:
        wb = Workbook()
        other = Workbook()
        with pytest.raises(KeyError):
            wb.remove(other["Sheet1"])


class TestWorksheetRename:
    def test_rename(self) -> None:
        wb = Workbook()
        ws = wb.active
        ws.title = "Data"
        assert wb.sheetnames == ["Data"]
        assert wb["Data"] is ws
        assert "Sheet1" not in wb

    def test_rename_case_only(self) -> None:
        wb = Workbook()
        ws = wb.active
        ws.title = "SHEET1"
        assert wb.sheetnames == ["SHEET1"]

    def test_rename_to_existing(self) -> None:
        wb = Workbook()
        wb.create_sheet("Data")
        ws = wb["Sheet1"]
        with pytest.raises(SheetnameReused):
            ws.title = "data"
        assert ws.title == "Sheet1"

    def test_rename_invalid(self) -> None:
        ws = Workbook().active
        with pytest.raises(SheetnameContainsInvalidCharacter):
            ws.title = "a[1]"
        assert ws.title == "Sheet1"

    def test_quoted_title(self) -> None:
        wb = Workbook()
        assert wb.active.quoted_title == "Sheet1"
        assert wb.create_sheet("Bob's Data").quoted_title == "'Bob''s Data'"


class TestWorksheetCells:
    def test_write_and_read(self) -> None:
        ws = Workbook().active
        ws.write(1, 1, 42)
        assert ws.read(1, 1) == 42
        assert ws["B2"] == 42

    def test_setitem(self) -> None:
        ws = Workbook().active
        ws["$C$3"] = "x"
        assert ws.read(2, 2) == "x"

    def test_write_none_clears(self) -> None:
        ws = Workbook().active
        ws["A1"] = 1
        ws["A1"] = None
        assert ws["A1"] is None
        assert list(ws.iter_cells()) == []

    def test_limits(self) -> None:
        ws = Workbook().active
        ws.write(ROW_MAX - 1, 16383, "corner")
        assert ws["XFD1048576"] == "corner"
        with pytest.raises(RowColumnLimitError):
            ws.write(ROW_MAX, 0, 1)
        with pytest.raises(RowColumnLimitError):
            ws.write(0, 16384, 1)
        with pytest.raises(RowColumnLimitError):
            ws.write(-1, 0, 1)

    def test_read_enforces_limits(self) -> None:
        ws = Workbook().active
        assert ws["XFD1"] is None
        with pytest.raises(RowColumnLimitError):
            ws["ZZZ1"]
        with pytest.raises(RowColumnLimitError):
            ws["A1048577"]
        with pytest.raises(RowColumnLimitError):
            ws.read(0, 16384)
        with pytest.raises(RowColumnLimitError):
            ws["ZZZ1"] = 1

    def test_bad_reference(self) -> None:
        ws = Workbook().active
        with pytest.raises(InvalidCellReference):
            ws["1A"] = 1

    def test_iter_cells_row_major(self) -> None:
        ws = Workbook().active
        ws["B2"] = 2
        ws["A2"] = 1
        ws["C1"] = 0
        assert list(ws.iter_cells()) == [("C1", 0), ("A2", 1), ("B2", 2)]


class TestWorksheetReferences:
    def test_dimension_empty(self) -> None:
        assert Workbook().active.dimension == "A1"

    def test_dimension_single(self) -> None:
        ws = Workbook().active
        ws.write(4, 2, 1)
        assert ws.dimension == "C5"

    def test_dimension_range(self) -> None:
        ws = Workbook().active
        ws.write(2, 1, 1)
        ws.write(5, 3, 1)
        assert ws.dimension == "B3:D6"

    def test_range_ref(self) -> None:
        wb = Workbook()
        ws = wb.create_sheet("Q1 Sales")
        assert ws.range_ref(0, 1, 4, 1) == "'Q1 Sales'!$B$1:$B$5"
        assert wb.active.range_ref(0, 0, 0, 0) == "Sheet1!$A$1"


class TestWorksheetProtection:
    def test_unprotected(self) -> None:
        ws = Workbook().active
        assert ws.protected is False
        assert ws.protection_hash is None

    def test_protect_with_password(self) -> None:
        ws = Workbook().active
        ws.protect("password")
        assert ws.protected is True
        assert ws.protection_hash == "83AF"

    def test_protect_without_password(self) -> None:
        ws = Workbook().active
        ws.protect()
        assert ws.protected is True
        assert ws.protection_hash is None

    def test_long_password_hash_is_four_hex_digits(self) -> None:
        ws = Workbook().active
        ws.protect("a" * 65536)
        assert ws.protected is True
        assert ws.protection_hash is not None
        assert len(ws.protection_hash) == 4

    def test_unprotect(self) -> None:
        ws = Workbook().active
        ws.protect("password")
        ws.unprotect()
        assert ws.protected is False


class TestWorksheetAutofit:
    def test_autofit_widths(self) -> None:
        ws = Workbook().active
        ws["A1"] = "Hello"  # 33 px + 7 padding -> 40 px
        ws["B1"] = True  # "TRUE": 31 px + 7 -> 38 px
        ws["C1"] = "=SUM(A1:B1)"
        ws["D1"] = ""
        widths = ws.autofit()
        assert widths == {0: 5.0, 1: 4.71}
        assert ws.column_widths == widths

    def test_widest_value_wins(self) -> None:
        ws = Workbook().active
        ws["A1"] = "i"
        ws["A2"] = 12345  # "12345": 35 px + 7 -> 42 px
        ws["A3"] = "W"
        assert ws.autofit() == {0: 5.29}

    def test_autofit_empty(self) -> None:
        assert Workbook().active.autofit() == {}
