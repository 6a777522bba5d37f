"""Tests for minitalk.memory."""

import pytest

from minitalk.memory import (
    allocate_zeroed,
    compare_bytes,
    copy_bytes,
    copy_until,
    fill,
    find_byte,
    move_bytes,
    zero,
)


def test_zero_clears_prefix_only():
    buffer = bytearray(b"abcdef")
    result = zero(buffer, 3)
    assert result is buffer
    assert buffer == b"\0\0\0def"


def test_zero_whole_buffer():
    buffer = bytearray(b"xyz")
    zero(buffer, len(buffer))
    assert buffer == bytes(3)


def test_zero_past_end_raises():
    with pytest.raises(ValueError):
        zero(bytearray(2), 3)


def test_zero_negative_raises():
    with pytest.raises(ValueError):
        zero(bytearray(2), -1)


def test_allocate_zeroed_size_and_content():
    block = allocate_zeroed(4, 3)
    assert len(block) == 12
    assert set(block) == {0}
    block[0] = 1
    assert block[0] == 1


def test_allocate_zeroed_empty():
    assert allocate_zeroed(0, 8) == bytearray()
    assert allocate_zeroed(8, 0) == bytearray()


def test_allocate_zeroed_overflow_raises():
    with pytest.raises(OverflowError):
        allocate_zeroed(2**63, 4)


def test_allocate_zeroed_negative_raises():
    with pytest.raises(ValueError):
        allocate_zeroed(-1, 4)


def test_fill_sets_prefix():
    buffer = bytearray(b"hello")
    assert fill(buffer, ord("*"), 2) is buffer
    assert buffer == b"**llo"


def test_fill_truncates_value_to_byte():
    buffer = bytearray(3)
    fill(buffer, 0x141, 3)
    assert buffer == b"AAA"


def test_copy_bytes_copies_n():
    dest = bytearray(b"......")
    assert copy_bytes(dest, b"abcdef", 4) is dest
    assert dest == b"abcd.."


def test_copy_bytes_too_long_raises():
    with pytest.raises(ValueError):
        copy_bytes(bytearray(2), b"abc", 3)


def test_copy_until_without_stop_copies_all():
    dest = bytearray(5)
    assert copy_until(dest, b"hello", ord("z"), 5) is None
    assert dest == b"hello"


def test_copy_until_respects_n():
    dest = bytearray(b"....")
    assert copy_until(dest, b"ab=c", ord("="), 2) is None
    assert dest == b"ab.."


def test_find_byte_found():
    data = b"abcabc"
    assert find_byte(data, ord("c"), 6) == data.index(b"c")


def test_find_byte_outside_range():
    assert find_byte(b"abcabc", ord("c"), 2) is None


def test_find_byte_finds_nul():
    data = b"ab\0cd"
    assert find_byte(data, 0, 5) == data.index(b"\0")


def test_find_byte_truncates_value():
    data = b"xAy"
    assert find_byte(data, 0x141, 3) == data.index(b"A")


def test_compare_bytes_equal():
    assert compare_bytes(b"abc", b"abc", 3) == 0


def test_compare_bytes_zero_length():
    assert compare_bytes(b"a", b"b", 0) == 0


def test_compare_bytes_only_prefix():
    assert compare_bytes(b"abX", b"abY", 2) == 0


def test_compare_bytes_sign():
    assert compare_bytes(b"abc", b"abd", 3) < 0
    assert compare_bytes(b"abd", b"abc", 3) > 0


def test_compare_bytes_unsigned_and_antisymmetric():
    left, right = b"\x80", b"\x01"
    assert compare_bytes(left, right, 1) > 0
    assert compare_bytes(left, right, 1) == -compare_bytes(right, left, 1)


def test_compare_bytes_passes_nul():
    assert compare_bytes(b"a\0b", b"a\0c", 3) < 0


def test_compare_bytes_out_of_range_raises():
    with pytest.raises(ValueError):
        compare_bytes(b"ab", b"abc", 3)


def test_move_bytes_forward_overlap():
    buffer = bytearray(b"abcdef")
    assert move_bytes(buffer, 2, 0, 4) is buffer
    assert buffer == b"ababcd"


def test_move_bytes_backward_overlap():
    buffer = bytearray(b"abcdef")
    move_bytes(buffer, 0, 2, 4)
    assert buffer == b"cdefef"


def test_move_bytes_zero_length_untouched():
    buffer = bytearray(b"abc")
    move_bytes(buffer, 1, 0, 0)
    assert buffer == b"abc"


def test_move_bytes_out_of_range_raises():
    with pytest.raises(ValueError):
        move_bytes(bytearray(b"abc"), 2, 0, 2)