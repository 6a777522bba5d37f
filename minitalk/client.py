"""Signal client: sends a message to a server one bit at a time."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Callable
from typing import Sequence

from .protocol import message_to_bits


class Client:
    """Sends bits as SIGUSR1 (0) / SIGUSR2 (1) and waits for each SIGUSR1 reply."""

    def __init__(
        self,
        pid: int,
        send: Callable[[int, int], None] | None = None,
        wait: Callable[[], None] | None = None,
    ) -> None:
        self.pid = pid
        self._send = send if send is not None else os.kill
        self._wait = wait
        self._saved_mask: set[int] | None = None

    def _wait_for_ack(self) -> None:
        if self._wait is not None:
            self._wait()
        else:
            signal.sigwait({signal.SIGUSR1})

    def _block_ack(self) -> None:
        if self._wait is None and self._saved_mask is None:
            self._saved_mask = signal.pthread_sigmask(
                signal.SIG_BLOCK, {signal.SIGUSR1}
            )

    def close(self) -> None:
        """Restore the signal mask changed while waiting for replies."""
        if self._saved_mask is not None:
            signal.pthread_sigmask(signal.SIG_SETMASK, self._saved_mask)
            self._saved_mask = None

    def __enter__(self) -> "Client":
        self._block_ack()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def send_bit(self, bit: int) -> None:
        """Send one bit and block until the server acknowledges it."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self._block_ack()
        self._send(self.pid, signal.SIGUSR2 if bit else signal.SIGUSR1)
        self._wait_for_ack()

    def send_message(self, message: str | bytes) -> None:
        """Send a whole message followed by its terminator."""
        for bit in message_to_bits(message):
            self.send_bit(bit)


def main(argv: Sequence[str] | None = None) -> int:
    """Usage: client <server-pid> <message>."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        return 1
    try:
        pid = int(args[0])
    except ValueError:
        return 1
    if pid < 0:
        return 1
    try:
        with Client(pid) as client:
            client.send_message(args[1])
    except (OSError, ValueError):
        return 1
    print("Successful.")
    return 0


if __name__ == "__main__":
    sys.exit(main())