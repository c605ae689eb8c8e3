"""String helpers with the exact semantics the messaging tools rely on.

Positions are returned as indices (or ``None`` when nothing is found)
instead of pointers, and comparisons return the difference of the first
mismatching code points, so only the sign is meaningful to callers.
"""

from __future__ import annotations

from collections.abc import Callable
from itertools import islice, zip_longest

_WHITESPACE = " \t\n\v\f\r"
_NUL = "\0"


def _require_char(value: str, name: str) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one optional sign is accepted. A
    second sign makes the result 0, and parsing stops at the first
    character that is not a digit. Text with no digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    if rest[:1] in ("-", "+"):
        return 0
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    if not digits:
        return 0
    return sign * int("".join(digits))


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading '-' when negative."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty words."""
    _require_char(sep, "sep")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    if not chars:
        return text
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the index of the first match, 0 for an empty needle, or
    ``None`` when there is no match.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(a: str | bytes, b: str | bytes, n: int) -> int:
    """Compare at most ``n`` characters; the shorter string is padded with NUL.

    Comparison stops early once both strings have ended.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    left = (ch if isinstance(ch, int) else ord(ch) for ch in a)
    right = (ch if isinstance(ch, int) else ord(ch) for ch in b)
    for x, y in islice(zip_longest(left, right, fillvalue=0), n):
        if x == 0 and y == 0:
            break
        if x != y:
            return x - y
    return 0


def memcmp(a: bytes | bytearray | memoryview, b: bytes | bytearray | memoryview, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers as unsigned values."""
    left = bytes(a)
    right = bytes(b)
    if n < 0:
        raise ValueError("n must not be negative")
    if n > len(left) or n > len(right):
        raise ValueError("n exceeds the length of a buffer")
    for x, y in zip(left[:n], right[:n]):
        if x != y:
            return x - y
    return 0


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``.

    Searching for NUL finds the terminator, at ``len(text)``.
    """
    _require_char(char, "char")
    index = text.find(char)
    if index >= 0:
        return index
    if char == _NUL:
        return len(text)
    return None


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``.

    Searching for NUL finds the terminator, at ``len(text)``.
    """
    _require_char(char, "char")
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))