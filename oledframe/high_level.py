"""Functions that can be used for the most common use-cases for oledframe"""

import logging
from typing import Optional

from oledframe.delta import undiff
from oledframe.frame import DEFAULT_HEIGHT, DEFAULT_WIDTH, PAGE_HEIGHT, Frame
from oledframe.frameexceptions import LengthMismatch
from oledframe.runlength import rldecode, rldecode_into

log = logging.getLogger(__name__)


def decode_frame(
    data: bytes,
    base: Optional[bytes] = None,
    size: Optional[int] = None,
) -> bytes:
    """Decode a stored frame.

    :param data: RLE encoded frame data.
    :param base: The base frame the data was diffed against. When given,
        the decoded delta is padded with zeros to the length of the base
        and reversed against it.
    :param size: Maximum number of decoded bytes. Must equal the length
        of `base` when both are given.
    :return: The frame bytes.
    """
    if base is None:
        return rldecode(data, size)

    if size is not None and size != len(base):
        raise LengthMismatch(
            "Output size %d does not match the %d byte base" % (size, len(base))
        )
    output = bytearray(len(base))
    written = rldecode_into(data, output)
    log.debug("Decoded %d of %d delta bytes", written, len(base))
    undiff(base, output)
    return bytes(output)


def decode_frame_to_frame(
    data: bytes,
    base: Optional[bytes] = None,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
) -> Frame:
    """Decode a stored frame into a width x height Frame."""
    size = None if base is not None else width * height // PAGE_HEIGHT
    return Frame(width, height, decode_frame(data, base, size))
