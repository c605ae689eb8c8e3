"""The one-bit-per-signal wire protocol.

Each byte travels as eight signals, most significant bit first: SIGUSR1
carries a 0 and SIGUSR2 carries a 1. A message is the UTF-8 bytes of its
text followed by a NUL byte, which the receiver shows as a newline.
"""

from __future__ import annotations

import signal
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

BITS_PER_BYTE = 8
TERMINATOR = 0


def _byte_value(char: str | int | bytes) -> int:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        value = ord(char)
    elif isinstance(char, (bytes, bytearray)):
        if len(char) != 1:
            raise ValueError(f"expected a single byte, got {char!r}")
        value = char[0]
    elif isinstance(char, int):
        value = char
    else:
        raise TypeError(f"cannot encode {type(char).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{char!r} does not fit in one byte")
    return value


def encode_char(char: str | int | bytes) -> tuple[int, ...]:
    """The eight bits of one byte, most significant first."""
    value = _byte_value(char)
    return tuple((value >> shift) & 1 for shift in reversed(range(BITS_PER_BYTE)))


def encode_message(message: str | bytes) -> Iterator[int]:
    """Yield the bits of ``message`` followed by those of the NUL terminator."""
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if TERMINATOR in data:
        raise ValueError("message must not contain a NUL byte")
    for value in data:
        yield from encode_char(value)
    yield from encode_char(TERMINATOR)


@dataclass
class CharAssembler:
    """Collects bits until a whole byte has arrived."""

    count_bits: int = 0
    value: int = 0

    def push(self, bit: int) -> int | None:
        """Add one bit; return the completed byte, or None while incomplete."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self.value = ((self.value << 1) | bit) & 0xFF
        self.count_bits += 1
        if self.count_bits < BITS_PER_BYTE:
            return None
        completed = self.value
        self.count_bits = 0
        self.value = 0
        return completed


def decode_bits(bits: Iterable[int]) -> bytes:
    """What a receiver shows for ``bits``: each NUL becomes a newline.

    Bits left over after the last whole byte are not shown.
    """
    assembler = CharAssembler()
    output = bytearray()
    for bit in bits:
        completed = assembler.push(bit)
        if completed is None:
            continue
        output.append(ord("\n") if completed == TERMINATOR else completed)
    return bytes(output)


def bit_to_signal(bit: int) -> signal.Signals:
    """SIGUSR1 for a 0 bit, SIGUSR2 for anything else."""
    return signal.SIGUSR1 if bit == 0 else signal.SIGUSR2


def signal_to_bit(signum: int) -> int:
    """0 for SIGUSR1, 1 for SIGUSR2."""
    if signum == signal.SIGUSR1:
        return 0
    if signum == signal.SIGUSR2:
        return 1
    raise ValueError(f"signal {signum} carries no bit")