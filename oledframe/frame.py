"""Monochrome OLED frames.

The panel memory is organised in pages of 8 pixel rows. Every byte of a
page is one column of 8 vertical pixels, least significant bit on top,
and a page holds `width` bytes.
"""

from collections.abc import Sequence

from oledframe.frameexceptions import FrameValueError

PAGE_HEIGHT = 8

DEFAULT_WIDTH = 128
DEFAULT_HEIGHT = 32

PIXEL_OFF = "."
PIXEL_ON = "#"

BLOCK_OFF = "  "
BLOCK_ON = "██"


def _check_geometry(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise FrameValueError("Invalid frame size %dx%d" % (width, height))
    if height % PAGE_HEIGHT:
        raise FrameValueError(
            "Frame height %d is not a multiple of %d" % (height, PAGE_HEIGHT)
        )


class Frame:
    """A width x height grid of pixels, each 0 or 1."""

    def __init__(self, width: int, height: int, data: bytes = b"") -> None:
        _check_geometry(width, height)
        capacity = width * height // PAGE_HEIGHT
        if len(data) > capacity:
            raise FrameValueError(
                "%d bytes do not fit a %dx%d frame (%d bytes)"
                % (len(data), width, height, capacity)
            )
        self._rows = [[0] * width for _ in range(height)]
        # Bytes missing at the end are blank columns.
        for idx, b in enumerate(data):
            page, x = divmod(idx, width)
            top = page * PAGE_HEIGHT
            for bit in range(PAGE_HEIGHT):
                self._rows[top + bit][x] = (b >> bit) & 1

    def __repr__(self) -> str:
        return "<%s %dx%d>" % (self.__class__.__name__, self.width, self.height)

    def __str__(self) -> str:
        return "".join(
            "".join(BLOCK_ON if p else BLOCK_OFF for p in row) + "\n"
            for row in self._rows
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Frame):
            return NotImplemented
        return self._rows == other._rows

    @property
    def width(self) -> int:
        return len(self._rows[0])

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def rows(self) -> list[list[int]]:
        return [list(row) for row in self._rows]

    def pixel(self, x: int, y: int) -> int:
        return self._rows[y][x]

    @classmethod
    def from_text(cls, text: str) -> "Frame":
        """Build a frame from lines of '.' (off) and '#' (on)."""
        lines = text.splitlines()
        if not lines:
            raise FrameValueError("Empty frame text")
        width = len(lines[0])
        for lineno, line in enumerate(lines, 1):
            if len(line) != width:
                raise FrameValueError(
                    "Line %d is %d pixels wide, expected %d"
                    % (lineno, len(line), width)
                )

        frame = cls(width, len(lines))
        for y, line in enumerate(lines):
            for x, c in enumerate(line):
                if c == PIXEL_ON:
                    frame._rows[y][x] = 1
                elif c != PIXEL_OFF:
                    raise FrameValueError(
                        "Invalid pixel %r at line %d, column %d" % (c, y + 1, x + 1)
                    )
        return frame

    @classmethod
    def from_frames(cls, frames: Sequence["Frame"]) -> "Frame":
        """Majority vote of several frames.

        A pixel is on when it is on in more than half of `frames`.
        """
        if not frames:
            raise FrameValueError("No frames given")
        width, height = frames[0].dimensions
        for frame in frames:
            if frame.dimensions != (width, height):
                raise FrameValueError(
                    "Frame of size %dx%d among %dx%d frames"
                    % (frame.width, frame.height, width, height)
                )

        threshold = len(frames) // 2
        result = cls(width, height)
        for y in range(height):
            for x in range(width):
                votes = sum(frame._rows[y][x] for frame in frames)
                result._rows[y][x] = 1 if votes > threshold else 0
        return result

    def to_bytes(self, strip: bool = True) -> bytes:
        """Pack the frame into panel memory order.

        Trailing zero bytes are dropped unless `strip` is False.
        """
        packed = bytearray()
        for top in range(0, self.height, PAGE_HEIGHT):
            for x in range(self.width):
                b = 0
                for bit in range(PAGE_HEIGHT):
                    b |= self._rows[top + bit][x] << bit
                packed.append(b)
        if strip:
            packed = packed.rstrip(b"\x00")
        return bytes(packed)

    def to_text(self) -> str:
        return "".join(
            "".join(PIXEL_ON if p else PIXEL_OFF for p in row) + "\n"
            for row in self._rows
        )
