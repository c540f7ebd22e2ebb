import pytest

from solong.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix():
    buf = bytearray(b"cane")
    result = memset(buf, ord("x"), 4)
    assert result is buf
    assert buf == bytearray(b"xxxx")


def test_memset_partial_leaves_rest():
    buf = bytearray(b"cane")
    memset(buf, ord("x"), 2)
    assert buf[:2] == b"xx"
    assert buf[2:] == b"ne"


def test_memset_zero_count_is_noop():
    buf = bytearray(b"cane")
    memset(buf, ord("x"), 0)
    assert buf == bytearray(b"cane")


def test_memset_value_wraps_to_byte():
    buf = bytearray(3)
    memset(buf, 256 + ord("a"), 3)
    assert buf == bytearray(b"aaa")


def test_memset_past_end_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"hello")
    bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"lo"


def test_calloc_is_zeroed():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert all(byte == 0 for byte in buf)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 2)


def test_memchr_finds_first():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_limit():
    data = b"hello"
    assert memchr(data, ord("o"), 3) is None


def test_memchr_value_wraps_to_byte():
    data = b"abc"
    assert memchr(data, 256 + ord("c"), 3) == data.index(b"c")


def test_memcmp_equal_and_zero_count():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"xyz", 0) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_stops_at_limit():
    assert memcmp(b"abc", b"abd", 2) == 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_memcmp_is_antisymmetric():
    assert memcmp(b"kite", b"kilo", 4) == -memcmp(b"kilo", b"kite", 4)


def test_memcpy_copies_prefix():
    dst = bytearray(b"......")
    result = memcpy(dst, b"abc", 3)
    assert result is dst
    assert dst[:3] == b"abc"
    assert dst[3:] == b"..."


def test_memcpy_past_end_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 2, 0, 4)
    assert buf[:2] == original[:2]
    assert buf[2:6] == original[0:4]


def test_memmove_backward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 0, 2, 4)
    assert buf[0:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memmove_out_of_range_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)