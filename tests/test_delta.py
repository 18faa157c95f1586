import pytest

from oledframe.delta import diff, undiff
from oledframe.frameexceptions import LengthMismatch


@pytest.mark.parametrize(
    ("base", "other", "expected"),
    [
        ([1, 2, 3, 4, 5], [1, 2, 5, 1, 2], [0, 0, 254, 3, 3]),
        ([1, 2, 3, 4, 5], [0, 0, 254, 3, 3], [1, 2, 5, 1, 2]),
        ([0], [1], [255]),
        ([255], [0], [255]),
        ([], [], []),
    ],
)
def test_diff(base, other, expected):
    assert diff(bytes(base), bytes(other)) == bytes(expected)


def test_undiff_in_place():
    encoded = bytearray([0, 0, 254, 3, 3])
    assert undiff(bytes([1, 2, 3, 4, 5]), encoded) is None
    assert encoded == bytearray([1, 2, 5, 1, 2])


def test_undiff_wraps_around():
    encoded = bytearray([1, 200, 0])
    undiff(bytes([0, 100, 0]), encoded)
    assert encoded == bytearray([255, 156, 0])


def test_undiff_length_limits_range():
    encoded = bytearray([1, 1, 1])
    undiff(bytes([5, 5, 5]), encoded, 2)
    assert encoded == bytearray([4, 4, 1])


def test_undiff_zero_length():
    encoded = bytearray([1, 2])
    undiff(bytes([5, 5]), encoded, 0)
    assert encoded == bytearray([1, 2])


@pytest.mark.parametrize(
    ("base", "encoded"),
    [
        (b"\x01\x02", bytearray(b"\x01")),
        (b"", bytearray(b"\x01")),
    ],
)
def test_undiff_length_mismatch(base, encoded):
    with pytest.raises(LengthMismatch):
        undiff(base, encoded)


@pytest.mark.parametrize("length", [-1, 3])
def test_undiff_length_out_of_range(length):
    with pytest.raises(LengthMismatch):
        undiff(b"\x01\x02", bytearray(b"\x01\x02"), length)


def test_diff_length_mismatch():
    with pytest.raises(ValueError):
        diff(b"\x01\x02", b"\x01")


def test_undiff_reverses_diff():
    base = bytes((i * 37) % 256 for i in range(512))
    payload = bytes((i * 11 + 3) % 256 for i in range(512))
    encoded = bytearray(diff(base, payload))
    undiff(base, encoded)
    assert bytes(encoded) == payload


def test_undiff_twice_is_identity():
    base = bytes(range(0, 256, 3))
    payload = bytes(reversed(base))
    buf = bytearray(payload)
    undiff(base, buf)
    undiff(base, buf)
    assert bytes(buf) == payload
