"""ASCII character classification and case conversion.

Every function takes either a one-character string or an integer code.
Case conversion returns a value of the same kind it was given. Only the
ASCII ranges count; anything else is left alone or classified as false.
"""

from __future__ import annotations

from typing import TypeVar

_CharOrCode = TypeVar("_CharOrCode", str, int)


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_digit(code: int) -> bool:
    return ord("0") <= code <= ord("9")


def isalpha(c: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code)


def isdigit(c: str | int) -> bool:
    """True for the ASCII digits 0 to 9."""
    return _is_digit(_code(c))


def isalnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    code = _code(c)
    return _is_digit(code) or _is_lower(code) or _is_upper(code)


def isascii(c: str | int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: str | int) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def _shift_case(c: _CharOrCode, should_shift, delta: int) -> _CharOrCode:
    code = _code(c)
    if not should_shift(code):
        return c
    shifted = code + delta
    return chr(shifted) if isinstance(c, str) else shifted


def toupper(c: _CharOrCode) -> _CharOrCode:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    return _shift_case(c, _is_lower, -32)


def tolower(c: _CharOrCode) -> _CharOrCode:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    return _shift_case(c, _is_upper, 32)