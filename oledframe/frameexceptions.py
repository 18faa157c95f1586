__all__ = [
    "FrameException",
    "TruncatedInput",
    "OutputOverflow",
    "LengthMismatch",
    "FrameValueError",
]


class FrameException(Exception):
    """Base class for every error raised by oledframe."""


class TruncatedInput(FrameException, EOFError):
    """Raised when a record would read past the end of the encoded data."""


class OutputOverflow(FrameException, IndexError):
    """Raised when a record would write past the end of the output buffer."""


class LengthMismatch(FrameException, ValueError):
    """Raised when two buffers that must line up have different lengths."""


class FrameValueError(FrameException, ValueError):
    """Raised for invalid frame geometry or frame text."""
