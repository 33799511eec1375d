import pytest

from ftkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_bzero_zeroes_prefix_only():
    buffer = bytearray(b"abcdef")
    bzero(buffer, 3)
    assert buffer[:3] == bytes(3)
    assert buffer[3:] == b"def"


def test_bzero_zero_length_keeps_buffer():
    buffer = bytearray(b"abc")
    bzero(buffer, 0)
    assert buffer == b"abc"


def test_bzero_too_long():
    with pytest.raises(IndexError):
        bzero(bytearray(2), 3)


def test_calloc_size_and_contents():
    buffer = calloc(4, 3)
    assert len(buffer) == 4 * 3
    assert all(byte == 0 for byte in buffer)


@pytest.mark.parametrize("count,size", [(0, 5), (5, 0), (0, 0)])
def test_calloc_empty(count, size):
    assert calloc(count, size) == bytearray()


def test_calloc_overflow():
    with pytest.raises(MemoryError):
        calloc(2**64, 2)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 1)


def test_memchr_finds_first():
    data = b"hello"
    index = memchr(data, ord("l"), len(data))
    assert data[index] == ord("l")
    assert ord("l") not in data[:index]


def test_memchr_respects_limit():
    assert memchr(b"hello", ord("o"), 4) is None


def test_memchr_uses_low_byte():
    data = b"\x00\x41"
    assert memchr(data, 0x141, 2) == memchr(data, 0x41, 2)


def test_memcmp_equal():
    assert memcmp(b"abc", b"abc", 3) == 0


def test_memcmp_ignores_bytes_past_n():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x01", 1) == 0xFF - 0x01


def test_memcpy_round_trip():
    dest = bytearray(6)
    result = memcpy(dest, b"source", 4)
    assert result is dest
    assert dest[:4] == b"source"[:4]
    assert dest[4:] == bytes(2)


def test_memcpy_too_long():
    with pytest.raises(IndexError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    buffer = bytearray(b"abcdef")
    original = bytes(buffer)
    memmove(buffer, 2, 0, 4)
    assert buffer[2:] == original[0:4]
    assert buffer[:2] == original[:2]


def test_memmove_backward_overlap():
    buffer = bytearray(b"abcdef")
    original = bytes(buffer)
    memmove(buffer, 0, 2, 4)
    assert buffer[:4] == original[2:6]
    assert buffer[4:] == original[4:]


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memset_fills_prefix():
    buffer = bytearray(b"xxxxx")
    result = memset(buffer, ord("a"), 3)
    assert result is buffer
    assert set(buffer[:3]) == {ord("a")}
    assert buffer[3:] == b"xx"


def test_memset_truncates_value():
    buffer = memset(bytearray(2), 0x141, 2)
    assert set(buffer) == {0x41}


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, -1)