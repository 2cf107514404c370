"""Worksheet name quoting and validation.

Excel single-quotes sheet names in formula text when they contain a space,
``!`` or an apostrophe, doubling any apostrophes inside the name::

    Sheet1   -> Sheet1
    Sheet 5  -> 'Sheet 5'
    Sheet'7  -> 'Sheet''7'
"""

from __future__ import annotations

from xlsxref._errors import (
    SheetnameCannotBeBlank,
    SheetnameContainsInvalidCharacter,
    SheetnameLengthExceeded,
    SheetnameStartsOrEndsWithApostrophe,
)

SHEETNAME_MAX_LEN = 31

_INVALID_CHARS = frozenset("*?:[]\\/")
_QUOTE_TRIGGERS = (" ", "!", "'")


def quote_sheetname(sheetname: str) -> str:
    """Quote a worksheet name for use in a formula.

    Names that already start with an apostrophe are assumed to be quoted and
    are returned unchanged.
    """
    if sheetname.startswith("'"):
        return sheetname

    sheetname = sheetname.replace("'", "''")

    if any(ch in sheetname for ch in _QUOTE_TRIGGERS):
        sheetname = f"'{sheetname}'"

    return sheetname


def unquote_sheetname(sheetname: str) -> str:
    """Reverse ``quote_sheetname``: "'Sheet''7'" -> "Sheet'7"."""
    if len(sheetname) >= 2 and sheetname.startswith("'") and sheetname.endswith("'"):
        return sheetname[1:-1].replace("''", "'")
    return sheetname


def validate_sheetname(name: str, message: str = "") -> None:
    """Check a worksheet name against Excel's rules.

    Raises the first matching ``XlsxError`` subclass, carrying ``message`` as
    context for the caller.
    """
    if not name:
        raise SheetnameCannotBeBlank(message)

    # len() counts code points, matching Excel's character limit.
    if len(name) > SHEETNAME_MAX_LEN:
        raise SheetnameLengthExceeded(message)

    if any(ch in _INVALID_CHARS for ch in name):
        raise SheetnameContainsInvalidCharacter(message)

    if name.startswith("'") or name.endswith("'"):
        raise SheetnameStartsOrEndsWithApostrophe(message)
