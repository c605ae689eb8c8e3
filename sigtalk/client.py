"""Send a text message to a listening server, one signal per bit."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Sequence

from .formatting import print_formatted
from .protocol import bit_to_signal, encode_char, encode_message
from .textutil import atoi

DEFAULT_DELAY = 0.0001
"""Pause after each signal, in seconds, so the receiver keeps up."""


def send_bit(pid: int, bit: int, delay: float = DEFAULT_DELAY) -> None:
    """Signal one bit to ``pid``: SIGUSR1 for 0, SIGUSR2 for 1, then pause."""
    os.kill(pid, bit_to_signal(bit))
    time.sleep(delay)


def send_char(pid: int, char: str | int | bytes, delay: float = DEFAULT_DELAY) -> None:
    """Send the eight bits of one byte, most significant first."""
    for bit in encode_char(char):
        send_bit(pid, bit, delay)


def send_message(pid: int, message: str | bytes, delay: float = DEFAULT_DELAY) -> None:
    """Send every byte of ``message`` followed by the NUL terminator."""
    for bit in encode_message(message):
        send_bit(pid, bit, delay)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``client PID MESSAGE``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print_formatted("Error\n")
        return 1
    pid = atoi(args[0])
    if pid <= 0:
        print_formatted("Error\n")
        return 1
    try:
        send_message(pid, args[1])
    except (OSError, ValueError):
        print_formatted("Error\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())