"""Receive messages bit by bit from signals and print them."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from types import FrameType
from typing import BinaryIO

from .formatting import print_formatted
from .protocol import TERMINATOR, CharAssembler, signal_to_bit


@dataclass
class SignalReceiver:
    """Turns SIGUSR1/SIGUSR2 into bytes written to ``output``.

    A NUL byte ends a message and is written as a newline. Without an
    explicit ``output`` the bytes go to standard output.
    """

    output: BinaryIO | None = None
    assembler: CharAssembler = field(default_factory=CharAssembler)

    def handle(self, signum: int, frame: FrameType | None = None) -> None:
        """Signal handler: record one bit and write any completed byte."""
        completed = self.assembler.push(signal_to_bit(signum))
        if completed is None:
            return
        self._write(b"\n" if completed == TERMINATOR else bytes([completed]))

    def _write(self, data: bytes) -> None:
        if self.output is not None:
            self.output.write(data)
            self.output.flush()
            return
        stream = sys.stdout
        buffer = getattr(stream, "buffer", None)
        if buffer is not None:
            stream.flush()
            buffer.write(data)
            buffer.flush()
        else:
            stream.write(data.decode("latin-1"))
            stream.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: print the PID and wait for signals until interrupted."""
    print_formatted("Server PID: %d\n", os.getpid())
    receiver = SignalReceiver()
    previous = {
        signum: signal.signal(signum, receiver.handle)
        for signum in (signal.SIGUSR1, signal.SIGUSR2)
    }
    try:
        while True:
            signal.pause()
    except KeyboardInterrupt:
        return 0
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


if __name__ == "__main__":
    sys.exit(main())