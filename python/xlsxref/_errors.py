"""XlsxError hierarchy raised by name validation, parsing and the sheet model."""

from __future__ import annotations


class XlsxError(ValueError):
    """Base class for xlsxref errors.

    ``message`` is the caller-supplied context label, e.g. the name of the API
    call that triggered the check.
    """

    description = "xlsx error"

    def __init__(self, message: str = "") -> None:
        self.message = message
        text = f"{self.description}: {message}" if message else self.description
        super().__init__(text)


class SheetnameCannotBeBlank(XlsxError):
    description = "Worksheet name cannot be blank"


class SheetnameLengthExceeded(XlsxError):
    description = "Worksheet name exceeds Excel's limit of 31 characters"


class SheetnameContainsInvalidCharacter(XlsxError):
    description = "Worksheet name cannot contain invalid characters: '[ ] : * ? / \\'"


class SheetnameStartsOrEndsWithApostrophe(XlsxError):
    description = "Worksheet name cannot start or end with an apostrophe"


class SheetnameReused(XlsxError):
    """Raised when a workbook already holds a sheet of the same name.

    Excel compares sheet names case-insensitively.
    """

    description = "Worksheet name is already in use"


class RowColumnLimitError(XlsxError):
    description = "Row or column exceeds Excel's allowed limits (1,048,576 x 16,384)"


class InvalidCellReference(XlsxError):
    description = "Invalid A1 reference"
