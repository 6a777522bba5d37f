import os

import pytest

from minitalk.linereader import FD_MAX, LineReader, get_next_line


@pytest.fixture
def make_pipe():
    opened = []

    def _make(data: bytes, close_writer: bool = True):
        read_fd, write_fd = os.pipe()
        os.write(write_fd, data)
        opened.append(read_fd)
        if close_writer:
            os.close(write_fd)
        else:
            opened.append(write_fd)
        return read_fd, write_fd

    yield _make
    for fd in opened:
        try:
            os.close(fd)
        except OSError:
            pass


def test_reads_lines_with_newlines(make_pipe):
    fd, _ = make_pipe(b"first\nsecond\n")
    reader = LineReader(fd)
    assert reader.read_line() == b"first\n"
    assert reader.read_line() == b"second\n"
    assert reader.read_line() is None


def test_last_line_without_newline(make_pipe):
    fd, _ = make_pipe(b"one\ntail")
    reader = LineReader(fd)
    assert reader.read_line() == b"one\n"
    assert reader.read_line() == b"tail"
    assert reader.read_line() is None


def test_empty_input_returns_none(make_pipe):
    fd, _ = make_pipe(b"")
    assert LineReader(fd).read_line() is None


@pytest.mark.parametrize("size", [1, 2, 3, 7, 42, 1000])
def test_iteration_matches_splitlines(make_pipe, size):
    data = b"alpha\n\nbeta gamma delta\nx\n" + b"z" * 90 + b"\nend"
    fd, _ = make_pipe(data)
    lines = list(LineReader(fd, buffer_size=size))
    assert lines == data.splitlines(keepends=True)
    assert b"".join(lines) == data


def test_leftover_kept_between_calls(make_pipe):
    fd, _ = make_pipe(b"ab\ncd\n")
    reader = LineReader(fd, buffer_size=100)
    assert reader.read_line() == b"ab\n"
    assert reader.pending == b"cd\n"


def test_flush_discards_pending(make_pipe):
    fd, _ = make_pipe(b"a\nb\nc\n")
    reader = LineReader(fd, buffer_size=100)
    assert reader.read_line() == b"a\n"
    reader.flush()
    assert reader.pending == b""
    assert reader.read_line() is None


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(0, buffer_size=0)


def test_read_error_raises_and_clears():
    read_fd, write_fd = os.pipe()
    os.close(write_fd)
    os.close(read_fd)
    reader = LineReader(read_fd)
    with pytest.raises(OSError):
        reader.read_line()
    assert reader.pending == b""


def test_get_next_line_long_lines(make_pipe):
    data = b"q" * 100 + b"\n" + b"r" * 50 + b"\n"
    fd, _ = make_pipe(data)
    collected = []
    while (line := get_next_line(fd)) is not None:
        collected.append(line)
    assert collected == data.splitlines(keepends=True)


def test_get_next_line_flush(make_pipe):
    fd, _ = make_pipe(b"x\ny\n")
    assert get_next_line(fd) == b"x\n"
    assert get_next_line(fd, flush=True) is None
    assert get_next_line(fd) is None


def test_get_next_line_independent_descriptors(make_pipe):
    fd_a, _ = make_pipe(b"a1\na2\n")
    fd_b, _ = make_pipe(b"b1\nb2\n")
    assert get_next_line(fd_a) == b"a1\n"
    assert get_next_line(fd_b) == b"b1\n"
    assert get_next_line(fd_a) == b"a2\n"
    assert get_next_line(fd_b) == b"b2\n"
    assert get_next_line(fd_a) is None
    assert get_next_line(fd_b) is None


@pytest.mark.parametrize("fd", [-1, FD_MAX + 1])
def test_get_next_line_rejects_out_of_range(fd):
    with pytest.raises(ValueError):
        get_next_line(fd)