"""Line-by-line reading from file descriptors with per-descriptor buffering."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 42
FD_MAX = 100
_NEWLINE = b"\n"


class LineReader:
    """Reads newline-terminated lines from a file descriptor.

    Data is pulled ``buffer_size`` bytes at a time. Bytes read past the end
    of a line are kept for the next call. The last line is returned without
    a newline if the input does not end with one.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size!r}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    @property
    def pending(self) -> bytes:
        """Bytes read but not yet returned as part of a line."""
        return bytes(self._pending)

    def _fill(self) -> None:
        if _NEWLINE in self._pending:
            return
        while True:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self.flush()
                raise
            if not chunk:
                return
            self._pending += chunk
            if _NEWLINE in chunk:
                return

    def read_line(self) -> bytes | None:
        """Return the next line, newline included, or ``None`` at end of input."""
        self._fill()
        if not self._pending:
            return None
        end = self._pending.find(_NEWLINE)
        end = len(self._pending) if end < 0 else end + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line

    def flush(self) -> None:
        """Discard any buffered bytes."""
        self._pending.clear()

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int, flush: bool = False) -> bytes | None:
    """Read the next line from ``fd``, keeping leftover bytes between calls.

    With ``flush`` set, the buffered bytes for ``fd`` are discarded and
    ``None`` is returned. Descriptors outside ``0..FD_MAX`` are rejected.
    """
    if not 0 <= fd <= FD_MAX:
        raise ValueError(f"file descriptor out of range 0..{FD_MAX}: {fd!r}")
    if flush:
        reader = _readers.pop(fd, None)
        if reader is not None:
            reader.flush()
        return None
    reader = _readers.setdefault(fd, LineReader(fd))
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line