"""xlsxref — A1 references, sheet names and legacy encodings for xlsx writers.

Usage::

    from xlsxref import cell_range, chart_range_abs, hash_password, quote_sheetname

    cell_range(0, 0, 9, 0)                  # "A1:A10"
    chart_range_abs("Q1 Sales", 0, 1, 4, 1)   # "'Q1 Sales'!$B$1:$B$5"
    quote_sheetname("Sheet'7")              # "'Sheet''7'"
    f"{hash_password('password'):04X}"      # "83AF"
"""

from xlsxref._errors import (
    InvalidCellReference,
    RowColumnLimitError,
    SheetnameCannotBeBlank,
    SheetnameContainsInvalidCharacter,
    SheetnameLengthExceeded,
    SheetnameReused,
    SheetnameStartsOrEndsWithApostrophe,
    XlsxError,
)
from xlsxref._pixels import column_width_from_pixels, pixel_width
from xlsxref._protection import format_password_hash, hash_password
from xlsxref._sheetname import quote_sheetname, unquote_sheetname, validate_sheetname
from xlsxref._utils import (
    COL_MAX,
    ROW_MAX,
    cell_range,
    cell_range_absolute,
    cell_to_row_col,
    chart_range_abs,
    column_name_to_number,
    column_number_to_name,
    formula_to_string,
    range_to_row_col,
    row_col_to_cell,
    row_col_to_cell_absolute,
    to_xml_bool,
)
from xlsxref._workbook import Workbook
from xlsxref._worksheet import Worksheet

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "COL_MAX",
    "ROW_MAX",
    "InvalidCellReference",
    "RowColumnLimitError",
    "SheetnameCannotBeBlank",
    "SheetnameContainsInvalidCharacter",
    "SheetnameLengthExceeded",
    "SheetnameReused",
    "SheetnameStartsOrEndsWithApostrophe",
    "Workbook",
    "Worksheet",
    "XlsxError",
    "cell_range",
    "cell_range_absolute",
    "cell_to_row_col",
    "chart_range_abs",
    "column_name_to_number",
    "column_number_to_name",
    "column_width_from_pixels",
    "format_password_hash",
    "formula_to_string",
    "hash_password",
    "pixel_width",
    "quote_sheetname",
    "range_to_row_col",
    "row_col_to_cell",
    "row_col_to_cell_absolute",
    "to_xml_bool",
    "unquote_sheetname",
    "validate_sheetname",
]
