"""Legacy worksheet protection password hash.

This is the 16-bit obfuscation hash from ECMA-376-4 (Transitional Migration
Features, workbookProtection/sheetProtection ``password`` attribute). It is
not a security measure; it exists so files open with the same password in
Excel.
"""

from __future__ import annotations


def _rotate(hash_: int) -> int:
    # Rotate left by one bit inside a 15-bit field.
    return ((hash_ >> 14) & 0x01) | ((hash_ << 1) & 0x7FFF)


def hash_password(password: str) -> int:
    """Hash a worksheet password: ``hash_password("password") == 0x83AF``.

    Bytes are the UTF-8 encoding of ``password``, consumed last to first.
    """
    if not password:
        return 0

    data = password.encode("utf-8")
    hash_ = 0

    for byte in reversed(data):
        hash_ = _rotate(hash_)
        hash_ ^= byte

    hash_ = _rotate(hash_)
    hash_ ^= len(data) & 0xFFFF
    hash_ ^= 0xCE4B

    return hash_


def format_password_hash(hash_: int) -> str:
    """Render a hash the way the file format stores it: 0x83AF -> "83AF"."""
    return f"{hash_:04X}"
