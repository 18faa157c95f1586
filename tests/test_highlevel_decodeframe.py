import pytest

from oledframe.delta import diff
from oledframe.frame import Frame
from oledframe.frameexceptions import LengthMismatch, OutputOverflow
from oledframe.high_level import decode_frame, decode_frame_to_frame


def literal(payload: bytes) -> bytes:
    return bytes([0x80 | len(payload)]) + payload


class TestDecodeFrame:
    def test_without_base(self):
        assert decode_frame(bytes([3, 0, 0x82, 1, 0])) == bytes([0, 0, 0, 1, 0])

    def test_with_base(self):
        base = bytes([1, 2, 3, 4, 5])
        payload = bytes([1, 2, 5, 1, 2])
        data = literal(diff(base, payload))
        assert decode_frame(data, base=base) == payload

    def test_short_delta_is_zero_padded(self):
        base = bytes([9, 8, 7, 6])
        # delta of 0 leaves the base value
        assert decode_frame(bytes([2, 1]), base=base) == bytes([8, 7, 7, 6])

    def test_delta_longer_than_base(self):
        with pytest.raises(OutputOverflow):
            decode_frame(bytes([5, 0]), base=bytes(4))

    def test_size_must_match_base(self):
        with pytest.raises(LengthMismatch):
            decode_frame(bytes([2, 1]), base=bytes(4), size=3)

    def test_size_matching_base(self):
        assert decode_frame(bytes([4, 0]), base=bytes([1, 1, 1, 1]), size=4) == (
            bytes([1, 1, 1, 1])
        )

    def test_size_without_base(self):
        with pytest.raises(OutputOverflow):
            decode_frame(bytes([5, 1]), size=4)


class TestDecodeFrameToFrame:
    def test_frame_geometry(self):
        frame = decode_frame_to_frame(bytes([32, 0xFF]), width=16, height=16)
        assert frame.dimensions == (16, 16)
        assert all(p == 1 for row in frame.rows for p in row)

    def test_too_much_data_for_panel(self):
        with pytest.raises(OutputOverflow):
            decode_frame_to_frame(bytes([17, 0]), width=16, height=8)

    def test_with_base(self):
        base_frame = Frame.from_text("#.\n" + "..\n" * 7)
        frame = Frame.from_text(".#\n" + "..\n" * 7)
        base = base_frame.to_bytes(strip=False)
        data = literal(diff(base, frame.to_bytes(strip=False)))
        decoded = decode_frame_to_frame(data, base=base, width=2, height=8)
        assert decoded == frame
