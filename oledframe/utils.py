"""Miscellaneous Routines."""

from collections import Counter
from collections.abc import Sequence

from oledframe.frameexceptions import FrameValueError, LengthMismatch

# Source listings keep array bodies under this many columns.
MAX_LINE_WIDTH = 80


def most_common_bytes(frames: Sequence[bytes]) -> bytes:
    """For every byte position, pick the value seen most often in `frames`.

    Ties go to the value that appears first. The result works as a base
    frame that keeps many deltas at zero.
    """
    if not frames:
        raise FrameValueError("No frames given")
    size = len(frames[0])
    for frame in frames:
        if len(frame) != size:
            raise LengthMismatch(
                "Frame of %d bytes among %d byte frames" % (len(frame), size)
            )

    picked = bytearray()
    for idx in range(size):
        counts = Counter(frame[idx] for frame in frames)
        picked.append(max(counts, key=counts.__getitem__))
    return bytes(picked)


def _wrap_values(data: bytes) -> str:
    if not data:
        raise ValueError("Cannot format an empty array")
    parts = []
    col = 0
    for v in data[:-1]:
        token = "%d, " % v
        col += len(token)
        if col < MAX_LINE_WIDTH:
            parts.append(token)
        else:
            col = len(token)
            parts.append("\n" + token)
    parts.append("%d" % data[-1])
    return "".join(parts)


def format_c_array(name: str, data: bytes) -> str:
    """Render `data` as a PROGMEM C array definition."""
    return "static const uint8_t PROGMEM %s[%d] = {\n%s\n};\n" % (
        name,
        len(data),
        _wrap_values(data),
    )


def format_rust_array(name: str, data: bytes) -> str:
    """Render `data` as a Rust const array."""
    return "const %s: [u8; %d] = [\n%s\n];\n" % (name, len(data), _wrap_values(data))
