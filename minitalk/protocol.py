"""Bit-level wire protocol: each byte travels as eight signals, MSB first."""

from __future__ import annotations

from collections.abc import Iterator

BITS_PER_CHAR = 8
TERMINATOR = 0


class MessageBuffer:
    """Accumulates the bytes of a message until it is complete."""

    def __init__(self) -> None:
        self._chars = bytearray()

    def add(self, char: int) -> None:
        """Append one byte (0-255) to the message."""
        self._chars.append(char)

    def clear(self) -> None:
        """Drop everything received so far."""
        self._chars.clear()

    def take(self) -> bytes:
        """Return the accumulated bytes and empty the buffer."""
        data = bytes(self._chars)
        self.clear()
        return data

    def __len__(self) -> int:
        return len(self._chars)


class BitDecoder:
    """Rebuilds messages from a stream of bits tagged with their sender.

    A change of sender discards any partial message. A zero byte ends the
    message, which ``feed`` then returns without the terminator.
    """

    def __init__(self) -> None:
        self.buffer = MessageBuffer()
        self.sender: int | None = None
        self._current = 0
        self._received = 0

    def _reset(self) -> None:
        self.buffer.clear()
        self._current = 0
        self._received = 0

    def feed(self, bit: int, sender: int) -> bytes | None:
        """Consume one bit; return the message when its terminator arrives."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        if sender != self.sender:
            self._reset()
            self.sender = sender
        self._current = ((self._current << 1) | int(bit)) & 0xFF
        self._received += 1
        if self._received < BITS_PER_CHAR:
            return None
        char = self._current
        self._current = 0
        self._received = 0
        if char == TERMINATOR:
            return self.buffer.take()
        self.buffer.add(char)
        return None


def char_to_bits(char: int) -> tuple[int, ...]:
    """Return the eight bits of a byte, most significant first."""
    if not 0 <= char <= 0xFF:
        raise ValueError(f"byte out of range: {char!r}")
    return tuple((char >> shift) & 1 for shift in range(BITS_PER_CHAR - 1, -1, -1))


def message_to_bits(message: str | bytes) -> Iterator[int]:
    """Yield the bits of a message followed by its zero terminator."""
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if TERMINATOR in data:
        raise ValueError("message must not contain a NUL byte")
    for char in data:
        yield from char_to_bits(char)
    yield from char_to_bits(TERMINATOR)