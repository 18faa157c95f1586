#
# RunLength decoder for OLED frame data.
#
# Each record starts with a control byte. Bit 7 selects the mode and
# bits 0-6 hold the number of output bytes the record produces:
#
#   0nnnnnnn vv          repeat byte vv n times
#   1nnnnnnn d1 .. dn    copy the n bytes d1 .. dn verbatim
#
# There is no end-of-data marker; the stream ends with the input.
#

import logging
from collections.abc import Iterator
from typing import NamedTuple, Optional, Union

from oledframe.frameexceptions import FrameValueError, OutputOverflow, TruncatedInput

log = logging.getLogger(__name__)

MODE_BIT = 0x80
COUNT_MASK = 0x7F


class RepeatRun(NamedTuple):
    count: int
    value: int

    def expand(self) -> bytes:
        return bytes((self.value,)) * self.count


class LiteralRun(NamedTuple):
    count: int
    data: bytes

    def expand(self) -> bytes:
        return self.data


Record = Union[RepeatRun, LiteralRun]


def parse_control(byte: int) -> tuple[bool, int]:
    """Split a control byte into (is_literal, count)."""
    return bool(byte & MODE_BIT), byte & COUNT_MASK


def _input_end(data: bytes, length: Optional[int]) -> int:
    if length is None:
        return len(data)
    if length < 0:
        raise FrameValueError("Negative input length: %d" % length)
    if len(data) < length:
        log.warning(
            "Input length %d exceeds the %d bytes available, stopping at the end",
            length,
            len(data),
        )
        return len(data)
    return length


def iter_records(data: bytes, length: Optional[int] = None) -> Iterator[Record]:
    """Yield the records of an encoded stream in order.

    Only the first `length` bytes of `data` are read (all of them when
    `length` is None). A record whose body does not fit in that range
    raises TruncatedInput; the records before it are still yielded.
    """
    end = _input_end(data, length)
    pos = 0
    while pos < end:
        is_literal, count = parse_control(data[pos])
        if is_literal:
            stop = pos + 1 + count
            if end < stop:
                raise TruncatedInput(
                    "Literal run at offset %d needs %d bytes, only %d left"
                    % (pos, count, end - pos - 1)
                )
            yield LiteralRun(count, bytes(data[pos + 1 : stop]))
        else:
            stop = pos + 2
            if end < stop:
                raise TruncatedInput(
                    "Repeat run at offset %d is missing its value byte" % pos
                )
            yield RepeatRun(count, data[pos + 1])
        pos = stop


def rldecode_into(
    data: bytes,
    output: Union[bytearray, memoryview],
    length: Optional[int] = None,
) -> int:
    """Decode `data` into the caller's `output` buffer.

    Writing starts at offset 0 and the number of bytes written is
    returned. Every record is checked against the input and the output
    capacity before anything of it is written, so on TruncatedInput or
    OutputOverflow the output holds exactly the preceding records.
    """
    capacity = len(output)
    pos = 0
    for record in iter_records(data, length):
        stop = pos + record.count
        if capacity < stop:
            raise OutputOverflow(
                "%s needs output[%d:%d], buffer holds %d bytes"
                % (type(record).__name__, pos, stop, capacity)
            )
        log.debug("%r -> output[%d:%d]", record, pos, stop)
        output[pos:stop] = record.expand()
        pos = stop
    return pos


def rldecode(data: bytes, size: Optional[int] = None) -> bytes:
    """Decode a whole stream and return the produced bytes.

    With `size` the result may not be longer than `size` bytes
    (OutputOverflow otherwise); without it the output grows as needed.
    """
    if size is not None:
        output = bytearray(size)
        written = rldecode_into(data, output)
        return bytes(output[:written])

    decoded = bytearray()
    for record in iter_records(data):
        decoded += record.expand()
    return bytes(decoded)


def decoded_size(data: bytes, length: Optional[int] = None) -> int:
    """Return the number of bytes `data` expands to."""
    return sum(record.count for record in iter_records(data, length))
