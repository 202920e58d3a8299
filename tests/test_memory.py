import pytest

from cub3d.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
    strdup,
    strlcat,
    strlcpy,
    strlen,
)


def test_memset_fills_prefix_only():
    buf = bytearray(6)
    result = memset(buf, ord("x"), 4)
    assert result is buf
    assert bytes(buf[:4]) == b"x" * 4
    assert bytes(buf[4:]) == bytes(2)


def test_memset_truncates_value_to_byte():
    buf = bytearray(3)
    memset(buf, 0x1FF, 3)
    assert set(buf) == {0xFF}


def test_memset_beyond_buffer_rejected():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert bytes(buf) == bytes(3) + b"def"


def test_calloc_is_zero_filled():
    buf = calloc(4, 3)
    assert len(buf) == 4 * 3
    assert not any(buf)


def test_calloc_negative_rejected():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memcpy_copies_and_returns_dest():
    dest = bytearray(5)
    src = b"hello world"
    result = memcpy(dest, src, 5)
    assert result is dest
    assert bytes(dest) == src[:5]


def test_memcpy_both_none_returns_none():
    assert memcpy(None, None, 3) is None


def test_memcpy_source_too_short():
    with pytest.raises(ValueError):
        memcpy(bytearray(4), b"ab", 4)


def test_memmove_overlap_forward():
    data = bytearray(b"abcdefgh")
    original = bytes(data)
    view = memoryview(data)
    dest = view[2:]
    result = memmove(dest, view[:6], 6)
    assert result is dest
    assert bytes(result) == original[:6]
    assert bytes(data) == original[:2] + original[:6]


def test_memmove_overlap_backward():
    data = bytearray(b"abcdefgh")
    original = bytes(data)
    view = memoryview(data)
    dest = view[:6]
    result = memmove(dest, view[2:], 6)
    assert result is dest
    assert bytes(result) == original[2:]
    assert bytes(data) == original[2:] + original[6:]


def test_memchr_finds_byte_within_limit():
    buf = b"north\0south"
    assert memchr(buf, ord("s"), len(buf)) == buf.index(b"s")
    assert memchr(buf, ord("s"), buf.index(b"s")) is None


def test_memchr_finds_nul():
    buf = b"ab\0cd"
    assert memchr(buf, 0, len(buf)) == buf.index(b"\0")


def test_memcmp_equal_and_ordered():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_does_not_stop_at_nul():
    assert memcmp(b"a\0b", b"a\0c", 3) == ord("b") - ord("c")


def test_memcmp_limited_to_n():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_strlen_stops_at_nul():
    assert strlen(b"hello\0world") == len(b"hello")


def test_strlen_without_nul_is_length():
    data = bytearray(b"texture")
    assert strlen(data) == len(data)


def test_strdup_round_trip():
    data = bytearray(b"./east.xpm\0junk")
    copy = strdup(data)
    assert copy == b"./east.xpm"
    data[0] = ord("X")
    assert copy == b"./east.xpm"


def test_strlcpy_fits():
    dst = bytearray(10)
    src = b"abc"
    assert strlcpy(dst, src, len(dst)) == len(src)
    assert strdup(dst) == src


def test_strlcpy_truncates_and_terminates():
    dst = bytearray(b"zzzzzz")
    src = b"abcdef"
    assert strlcpy(dst, src, 4) == len(src)
    assert strdup(dst) == src[:3]
    assert dst[3] == 0


def test_strlcpy_zero_size_leaves_dst():
    dst = bytearray(b"keep")
    assert strlcpy(dst, b"abc", 0) == len(b"abc")
    assert bytes(dst) == b"keep"


def test_strlcpy_destination_too_small():
    with pytest.raises(ValueError):
        strlcpy(bytearray(2), b"abcdef", 10)


def test_strlcat_appends():
    dst = bytearray(b"foo" + bytes(10))
    src = b"bar"
    assert strlcat(dst, src, len(dst)) == len(b"foo") + len(src)
    assert strdup(dst) == b"foo" + src


def test_strlcat_truncates_to_size():
    dst = bytearray(b"foo" + bytes(10))
    src = b"barbaz"
    size = 6
    assert strlcat(dst, src, size) == len(b"foo") + len(src)
    assert strdup(dst) == (b"foo" + src)[: size - 1]


def test_strlcat_size_smaller_than_dst_leaves_dst():
    dst = bytearray(b"abcdef\0")
    src = b"xyz"
    assert strlcat(dst, src, 2) == 2 + len(src)
    assert bytes(dst) == b"abcdef\0"


def test_strlcat_negative_size_rejected():
    with pytest.raises(ValueError):
        strlcat(bytearray(4), b"a", -1)