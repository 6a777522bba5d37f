"""Signal server: decodes SIGUSR1/SIGUSR2 bits into messages and prints them."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Callable
from typing import BinaryIO, Sequence

from .protocol import BitDecoder

_BIT_FOR_SIGNAL = {signal.SIGUSR1: 0, signal.SIGUSR2: 1}


def _acknowledge(pid: int) -> None:
    os.kill(pid, signal.SIGUSR1)


class Server:
    """Receives bits from clients and writes each finished message out."""

    def __init__(
        self,
        output: BinaryIO | None = None,
        acknowledge: Callable[[int], None] | None = None,
    ) -> None:
        self.output = output if output is not None else sys.stdout.buffer
        self.acknowledge = acknowledge if acknowledge is not None else _acknowledge
        self.decoder = BitDecoder()

    def handle_bit(self, bit: int, sender_pid: int) -> bytes | None:
        """Process one bit, print a completed message, then acknowledge."""
        message = self.decoder.feed(bit, sender_pid)
        if message is not None:
            self.output.write(message + b"\n")
            self.output.flush()
        self.acknowledge(sender_pid)
        return message

    def serve_forever(self) -> None:
        """Announce the PID and handle incoming signals until interrupted."""
        watched = set(_BIT_FOR_SIGNAL)
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, watched)
        try:
            self.output.write(f"Server PID: {os.getpid()}\n".encode())
            self.output.flush()
            while True:
                info = signal.sigwaitinfo(watched)
                self.handle_bit(_BIT_FOR_SIGNAL[info.si_signo], info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the server until interrupted."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        return 1
    try:
        Server().serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())