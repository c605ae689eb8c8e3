"""A small printf-style formatter.

Supported conversions: ``%c`` ``%s`` ``%p`` ``%d`` ``%i`` ``%u`` ``%x``
``%X`` and ``%%``. Integers follow 32-bit C ``int``/``unsigned int``
rules, pointers are shown in lower-case hex. An unknown conversion
character is consumed and produces no output. There are no flags,
widths or precisions.
"""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int(value: Any, spec: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}") from None


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _format_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _as_int(value, "p") & _POINTER_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _format_signed(value: Any) -> str:
    return str(_to_int32(_as_int(value, "d")))


def _format_unsigned(value: Any) -> str:
    return str(_as_int(value, "u") & _UINT32_MASK)


def _format_hex_lower(value: Any) -> str:
    return f"{_as_int(value, 'x') & _UINT32_MASK:x}"


def _format_hex_upper(value: Any) -> str:
    return f"{_as_int(value, 'X') & _UINT32_MASK:X}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "p": _format_pointer,
    "d": _format_signed,
    "i": _format_signed,
    "u": _format_unsigned,
    "x": _format_hex_lower,
    "X": _format_hex_upper,
}


def _render(template: str, args: tuple[Any, ...]) -> Iterator[str]:
    pending = iter(args)
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, "")
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(pending)
        except StopIteration:
            raise ValueError(f"not enough arguments for %{spec} in {template!r}") from None
        yield convert(value)


def format_message(template: str, *args: Any) -> str:
    """Return ``template`` with its conversions replaced by ``args``."""
    return "".join(_render(template, args))


def print_formatted(template: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default) and return its length."""
    text = format_message(template, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    flush = getattr(stream, "flush", None)
    if flush is not None:
        flush()
    return len(text)