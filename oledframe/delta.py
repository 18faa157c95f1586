"""Byte-wise delta against a base frame.

A stored frame is the difference ``base[i] - frame[i]`` (modulo 256)
between the base frame and the frame itself. Subtracting once more from
the same base gives the frame back, so one operation both builds and
reverses the delta.
"""

from typing import Optional, Union

from oledframe.frameexceptions import LengthMismatch


def undiff(
    base: bytes,
    encoded: Union[bytearray, memoryview],
    length: Optional[int] = None,
) -> None:
    """Replace every ``encoded[i]`` with ``base[i] - encoded[i]`` in place.

    Only the first `length` bytes are touched when it is given.
    """
    if len(base) != len(encoded):
        raise LengthMismatch(
            "Base has %d bytes, encoded data has %d" % (len(base), len(encoded))
        )
    if length is None:
        length = len(base)
    elif not 0 <= length <= len(base):
        raise LengthMismatch(
            "Length %d out of range for %d byte buffers" % (length, len(base))
        )

    for i in range(length):
        encoded[i] = (base[i] - encoded[i]) & 0xFF


def diff(base: bytes, other: bytes) -> bytes:
    """Return ``base[i] - other[i]`` for every byte, as a new buffer."""
    if len(base) != len(other):
        raise LengthMismatch(
            "Base has %d bytes, other has %d" % (len(base), len(other))
        )
    return bytes((b - o) & 0xFF for b, o in zip(base, other))
