import pytest

from wirefdf.libft.memory import (
    bzero,
    memalloc,
    memccpy,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memalloc_zero_filled():
    buf = memalloc(8)
    assert len(buf) == 8
    assert all(b == 0 for b in buf)


def test_memalloc_negative():
    with pytest.raises(ValueError):
        memalloc(-1)


def test_memset_partial():
    buf = bytearray(b"hello")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxlo")


def test_memset_uses_low_byte():
    buf = bytearray(2)
    memset(buf, 0x141, 2)
    assert buf == bytearray(b"AA")


def test_memset_too_long():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_bzero():
    buf = bytearray(b"abcd")
    bzero(buf, 2)
    assert buf == bytearray(b"\x00\x00cd")


def test_memcpy():
    dest = bytearray(b"......")
    memcpy(dest, b"abc", 3)
    assert dest == bytearray(b"abc...")


def test_memcpy_source_too_short():
    with pytest.raises(IndexError):
        memcpy(bytearray(5), b"ab", 3)


def test_memccpy_stops_after_byte():
    dest = bytearray(b"------")
    end = memccpy(dest, b"ab:cd", ord(":"), 5)
    assert end == 3
    assert dest[:end] == bytearray(b"ab:")
    assert dest[end:] == bytearray(b"---")


def test_memccpy_not_found_copies_all():
    dest = bytearray(b"----")
    assert memccpy(dest, b"abcd", ord("z"), 4) is None
    assert dest == bytearray(b"abcd")


def test_memchr():
    data = b"find me"
    assert memchr(data, ord("m"), len(data)) == data.index(b"m")
    assert memchr(data, ord("m"), 3) is None
    assert memchr(data, ord("z"), len(data)) is None


def test_memcmp_equal_and_zero_length():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"xyz", 0) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_is_antisymmetric():
    a, b = b"\x01\xff\x10", b"\x01\x00\x20"
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_same_offset_unchanged():
    buf = bytearray(b"abcdef")
    memmove(buf, 1, 1, 4)
    assert buf == bytearray(b"abcdef")


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)